"""CORS settings for browser clients of the sentiment API."""

import re
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from app.utils.exceptions import SecurityConfigError

_ORIGIN_PATTERN = re.compile(r"^https?://[a-zA-Z0-9.-]+(?::[0-9]+)?(?:/.*)?$")


class SecurityConfig(BaseSettings):
    """Origins allowed to call the API from a browser.

    Set `SENTIMENT_ALLOWED_ORIGINS` to a JSON list, e.g.
    `["https://reviews.example.com"]`. The defaults cover the usual local
    front-end dev servers.
    """

    allowed_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"],
        description="Origins allowed by the CORS middleware",
    )

    @field_validator("allowed_origins")
    @classmethod
    def validate_cors_origins(cls, origins: List[str]) -> List[str]:
        """Rejects wildcards and malformed URLs, and normalizes the rest.

        Browsers send the `Origin` header without a trailing slash, so one is
        stripped from each entry. Duplicates are dropped, keeping order.

        Raises:
            SecurityConfigError: If an origin is `*` or not an http(s) URL.
        """
        normalized: List[str] = []
        for origin in origins:
            origin = origin.strip()
            if origin == "*":
                raise SecurityConfigError(
                    "Wildcard CORS origin '*' is not allowed; list the front-end origins explicitly."
                )
            if not _ORIGIN_PATTERN.match(origin):
                raise SecurityConfigError(f"Invalid CORS origin URL: {origin}")
            origin = origin.rstrip("/")
            if origin not in normalized:
                normalized.append(origin)
        return normalized

    class Config:
        env_prefix = "SENTIMENT_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
