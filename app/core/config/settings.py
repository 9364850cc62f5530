"""
Root Settings class composing all domain-specific configurations.

This module provides the main Settings class that brings together all
domain-specific configuration classes into a single, cohesive settings object.
"""

from typing import Any

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from app.core.config.monitoring import MonitoringConfig
from app.core.config.provider import ProviderConfig
from app.core.config.security import SecurityConfig
from app.core.config.server import ServerConfig
from app.core.config.storage import StorageConfig
from app.utils.exceptions import SettingsValidationError


class Settings(BaseSettings):
    """Main settings class composing all domain-specific configurations.

    All settings are accessed through their domain-specific structure
    (e.g., settings.server.debug, settings.provider.gemini_model).

    Attributes:
        server: Server and application configuration.
        provider: Sentiment provider configuration.
        storage: Review store configuration.
        security: CORS configuration.
        monitoring: Monitoring and logging configuration.
    """

    server: ServerConfig = Field(default_factory=ServerConfig)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    @model_validator(mode="before")
    @classmethod
    def map_flat_fields(cls, values: Any) -> Any:
        """Map flat keyword arguments to nested domain configurations.

        This lets callers write `Settings(debug=True, database_path=":memory:")`
        instead of building every nested configuration by hand.
        """
        if not isinstance(values, dict):
            return values

        flat_map = {
            # Server
            "debug": ("server", "debug"),
            "environment": ("server", "environment"),
            "host": ("server", "host"),
            "port": ("server", "port"),
            "workers": ("server", "workers"),
            "app_name": ("server", "app_name"),
            "app_version": ("server", "app_version"),
            "api_prefix": ("server", "api_prefix"),
            # Provider
            "gemini_api_key": ("provider", "gemini_api_key"),
            "gemini_model": ("provider", "gemini_model"),
            "max_text_length": ("provider", "max_text_length"),
            # Storage
            "database_path": ("storage", "database_path"),
            # Security
            "allowed_origins": ("security", "allowed_origins"),
            # Monitoring
            "log_level": ("monitoring", "log_level"),
            "log_format": ("monitoring", "log_format"),
            "enable_metrics": ("monitoring", "enable_metrics"),
        }

        for flat_key, (domain, field) in flat_map.items():
            if flat_key in values:
                value = values.pop(flat_key)
                if domain not in values:
                    values[domain] = {}
                if isinstance(values[domain], dict):
                    values[domain][field] = value

        return values

    def _validate_worker_count_consistency(self) -> None:
        """Validates that multiple workers are not used in debug mode.

        Raises:
            SettingsValidationError: If debug is True and workers is greater than 1.
        """
        if self.server.debug and self.server.workers > 1:
            raise SettingsValidationError("Cannot use multiple workers in debug mode")

    def _validate_reviews_limits(self) -> None:
        """Validates that the default reviews limit does not exceed the maximum.

        Raises:
            SettingsValidationError: If the default limit is larger than the maximum.
        """
        if self.storage.default_reviews_limit > self.storage.max_reviews_limit:
            raise SettingsValidationError(
                f"default_reviews_limit ({self.storage.default_reviews_limit}) cannot exceed "
                f"max_reviews_limit ({self.storage.max_reviews_limit})"
            )

    @model_validator(mode="after")
    def validate_configuration_consistency(self):
        """Performs cross-field validation to ensure configuration consistency."""
        self._validate_worker_count_consistency()
        self._validate_reviews_limits()
        return self

    @property
    def debug(self) -> bool:
        return self.server.debug

    @property
    def log_level(self) -> str:
        return self.monitoring.log_level

    @property
    def enable_metrics(self) -> bool:
        return self.monitoring.enable_metrics

    @property
    def app_version(self) -> str:
        return self.server.app_version

    @property
    def max_text_length(self) -> int:
        return self.provider.max_text_length

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    """Provides a dependency-injected instance of the application settings.

    This function is used by FastAPI's dependency injection system to make the
    global Settings object available to route handlers and other dependencies.

    Returns:
        The singleton instance of the application settings.
    """
    return settings
