"""HTTP server settings for the sentiment service."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_ENVIRONMENT_ALIASES = {"dev": "development", "prod": "production", "stage": "staging"}
ENVIRONMENTS = ("development", "staging", "production", "test")


class ServerConfig(BaseSettings):
    """Application identity and uvicorn server options.

    Attributes:
        app_name: Title shown in the OpenAPI docs and the root endpoint.
        app_version: Semantic version reported by health checks and logs.
        debug: Enables the interactive docs and uvicorn auto-reload.
        environment: Deployment environment name.
        host: Interface uvicorn binds to.
        port: Port uvicorn listens on.
        workers: Number of uvicorn worker processes.
        api_prefix: Path prefix of the sentiment API routes.
    """

    app_name: str = Field(
        default="Sentiment Analysis API",
        description="Service title",
        min_length=1,
        max_length=100,
    )
    app_version: str = Field(
        default="1.0.0",
        description="Service version",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9]+)?$",
    )
    debug: bool = Field(default=False, description="Enable docs and auto-reload")
    environment: str = Field(default="production", description="Deployment environment")

    host: str = Field(
        default="0.0.0.0",
        description="Bind address",
        pattern=r"^(\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}|localhost)$",
    )
    port: int = Field(default=3002, description="Listen port", ge=1024, le=65535)
    workers: int = Field(default=1, description="uvicorn worker processes", ge=1, le=16)
    api_prefix: str = Field(
        default="/api",
        description="Path prefix of the sentiment API",
        pattern=r"^(/[a-zA-Z0-9_-]+)*$",
    )

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, value: str) -> str:
        """Lowercases the environment name and expands short aliases."""
        value = value.strip().lower()
        value = _ENVIRONMENT_ALIASES.get(value, value)
        if value not in ENVIRONMENTS:
            raise ValueError(f"environment must be one of {', '.join(ENVIRONMENTS)}")
        return value

    class Config:
        env_prefix = "SENTIMENT_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
