"""
Factory for creating sentiment provider instances.

This module implements the Factory pattern for creating providers based on
the configured provider name. It abstracts the creation logic and caches
instances so that HTTP clients are shared across requests.
"""

from typing import Dict, List, Optional

from app.core.config import SUPPORTED_PROVIDERS, Settings, get_settings
from app.core.logging import get_logger
from app.models.base import SentimentProvider
from app.utils.exceptions import UnsupportedProviderError

logger = get_logger(__name__)

# Cache for provider instances to ensure singleton behavior
_provider_cache: Dict[str, SentimentProvider] = {}


class ProviderFactory:
    """Factory class for creating and managing sentiment provider instances."""

    @staticmethod
    def create_provider(name: str, settings: Optional[Settings] = None) -> SentimentProvider:
        """Create a provider instance for the given name.

        Each provider is instantiated only once; later calls return the
        cached instance. Passing explicit `settings` builds a fresh,
        uncached instance from them.

        Args:
            name: The provider name ('gemini' or 'rule_based').
            settings: Optional settings to build the provider from.

        Returns:
            An instance implementing the `SentimentProvider` protocol.

        Raises:
            UnsupportedProviderError: If the provider name is not supported.

        Example:
            >>> provider = ProviderFactory.create_provider("rule_based")
        """
        key = name.strip().lower().replace("-", "_")

        use_cache = settings is None
        if use_cache and key in _provider_cache:
            return _provider_cache[key]

        settings = settings or get_settings()

        if key == "rule_based":
            from app.models.rule_based import RuleBasedProvider

            provider = RuleBasedProvider(preview_length=settings.provider.preview_length)
        elif key == "gemini":
            from app.models.gemini import GeminiProvider

            provider = GeminiProvider.from_settings(settings)
        else:
            raise UnsupportedProviderError(
                provider=name, supported_providers=ProviderFactory.get_available_providers()
            )

        logger.info(
            "Created sentiment provider",
            provider=key,
            available=provider.is_available(),
        )
        if use_cache:
            _provider_cache[key] = provider
        return provider

    @staticmethod
    def get_available_providers() -> List[str]:
        """Get the list of supported provider names."""
        return list(SUPPORTED_PROVIDERS)

    @staticmethod
    def reset_providers() -> None:
        """Clear the provider cache, forcing new instances on the next call.

        This does not close HTTP clients; call `aclose()` on providers that
        are still in use before resetting.
        """
        logger.info("Clearing provider cache", cached_count=len(_provider_cache))
        _provider_cache.clear()

    @staticmethod
    def get_cached_providers() -> Dict[str, SentimentProvider]:
        """Get a copy of the current provider cache."""
        return _provider_cache.copy()
