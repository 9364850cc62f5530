"""Sentiment provider configuration settings."""

import re
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

from app.utils.exceptions import ProviderConfigError

SUPPORTED_PROVIDERS = ("gemini", "rule_based")


class ProviderConfig(BaseSettings):
    """Sentiment provider configuration.

    Attributes:
        provider: The primary provider (`gemini` or `rule_based`). The
            rule-based scorer is always used as the fallback.
        gemini_api_key: API key for the Gemini API. Also read from the plain
            `GEMINI_API_KEY` environment variable.
        gemini_model: The Gemini model identifier.
        gemini_api_base: Base URL of the Generative Language REST API.
        request_timeout_seconds: Timeout for a single provider request.
        max_text_length: The maximum length of input text.
        preview_length: Number of characters of the text echoed in results.
    """

    provider: str = Field(
        default="gemini",
        description="Primary sentiment provider",
    )
    gemini_api_key: Optional[str] = Field(
        default=None,
        description="API key for the Gemini API",
        validation_alias=AliasChoices("SENTIMENT_GEMINI_API_KEY", "GEMINI_API_KEY", "gemini_api_key"),
    )
    gemini_model: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model identifier",
        min_length=1,
        max_length=100,
    )
    gemini_api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Generative Language API",
    )
    request_timeout_seconds: float = Field(
        default=15.0,
        description="Timeout for a single provider request in seconds",
        gt=0,
        le=120,
    )
    max_text_length: int = Field(
        default=10000,
        description="Maximum input text length",
        ge=1,
        le=10000,
    )
    preview_length: int = Field(
        default=100,
        description="Number of characters of the analyzed text echoed in results",
        ge=10,
        le=1000,
    )

    @property
    def gemini_enabled(self) -> bool:
        """True when the Gemini provider is selected and has a key."""
        return self.provider == "gemini" and bool(self.gemini_api_key)

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        """Normalizes the provider name and checks it is supported.

        Raises:
            ProviderConfigError: If the provider is unknown.
        """
        v = v.strip().lower().replace("-", "_")
        if v not in SUPPORTED_PROVIDERS:
            raise ProviderConfigError(
                f"Unsupported provider '{v}'. Expected one of: {', '.join(SUPPORTED_PROVIDERS)}"
            )
        return v

    @field_validator("gemini_model")
    @classmethod
    def validate_model_name(cls, v: str) -> str:
        """Validates the format of the Gemini model name.

        Raises:
            ProviderConfigError: If the model name has an invalid format.
        """
        if not re.match(r"^[a-zA-Z0-9._-]+$", v):
            raise ProviderConfigError(f"Invalid model name format: {v}")
        return v

    @field_validator("gemini_api_base")
    @classmethod
    def validate_api_base(cls, v: str) -> str:
        """Validates the API base URL and strips a trailing slash.

        Raises:
            ProviderConfigError: If the URL is not http(s).
        """
        if not re.match(r"^https?://[a-zA-Z0-9.-]+(?::[0-9]+)?(?:/.*)?$", v):
            raise ProviderConfigError(f"Invalid API base URL: {v}")
        return v.rstrip("/")

    @field_validator("gemini_api_key")
    @classmethod
    def validate_api_key(cls, v: Optional[str]) -> Optional[str]:
        """Treats a blank key as missing."""
        if v is not None and not v.strip():
            return None
        return v

    class Config:
        """Pydantic configuration."""

        env_prefix = "SENTIMENT_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        populate_by_name = True
