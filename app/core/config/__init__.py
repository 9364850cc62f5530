"""
Configuration management package for the sentiment service.

This package provides domain-specific configuration classes that are composed
into a root Settings class.
"""

from app.core.config.monitoring import MonitoringConfig
from app.core.config.provider import SUPPORTED_PROVIDERS, ProviderConfig
from app.core.config.security import SecurityConfig
from app.core.config.server import ServerConfig
from app.core.config.settings import Settings, get_settings
from app.core.config.storage import StorageConfig

__all__ = [
    "Settings",
    "get_settings",
    "ServerConfig",
    "ProviderConfig",
    "StorageConfig",
    "SecurityConfig",
    "MonitoringConfig",
    "SUPPORTED_PROVIDERS",
]
