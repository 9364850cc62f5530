"""Review storage configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings


class StorageConfig(BaseSettings):
    """SQLite review store configuration.

    Attributes:
        database_path: Path of the SQLite database file (`:memory:` is allowed).
        default_reviews_limit: Number of reviews returned when no limit is given.
        max_reviews_limit: Upper bound for the `limit` query parameter.
    """

    database_path: str = Field(
        default="sentiment_analysis.db",
        description="Path of the SQLite database file",
        min_length=1,
    )
    default_reviews_limit: int = Field(
        default=10,
        description="Number of recent reviews returned by default",
        ge=1,
        le=1000,
    )
    max_reviews_limit: int = Field(
        default=100,
        description="Maximum number of reviews returned per request",
        ge=1,
        le=1000,
    )

    class Config:
        """Pydantic configuration."""

        env_prefix = "SENTIMENT_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
