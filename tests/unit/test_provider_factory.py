"""Tests for `ProviderFactory`."""

import pytest

from app.core.config import Settings
from app.models.factory import ProviderFactory
from app.models.gemini import GeminiProvider
from app.models.rule_based import RuleBasedProvider
from app.utils.exceptions import UnsupportedProviderError


@pytest.fixture(autouse=True)
def clean_provider_cache():
    ProviderFactory.reset_providers()
    yield
    ProviderFactory.reset_providers()


@pytest.mark.unit
class TestProviderFactory:
    """Tests for provider creation and caching."""

    def test_creates_rule_based_provider(self):
        assert isinstance(ProviderFactory.create_provider("rule_based"), RuleBasedProvider)

    def test_normalizes_names(self):
        assert isinstance(ProviderFactory.create_provider(" Rule-Based "), RuleBasedProvider)

    def test_caches_instances(self):
        first = ProviderFactory.create_provider("rule_based")
        second = ProviderFactory.create_provider("rule_based")

        assert first is second
        assert "rule_based" in ProviderFactory.get_cached_providers()

    def test_reset_clears_cache(self):
        first = ProviderFactory.create_provider("rule_based")
        ProviderFactory.reset_providers()

        assert ProviderFactory.create_provider("rule_based") is not first

    def test_explicit_settings_bypass_cache(self):
        settings = Settings(gemini_api_key="abc", gemini_model="gemini-custom")

        provider = ProviderFactory.create_provider("gemini", settings=settings)

        assert isinstance(provider, GeminiProvider)
        assert provider.api_key == "abc"
        assert provider.model == "gemini-custom"
        assert ProviderFactory.get_cached_providers() == {}

    def test_unknown_provider_raises(self):
        with pytest.raises(UnsupportedProviderError) as exc_info:
            ProviderFactory.create_provider("openai")

        assert "openai" in str(exc_info.value)
        assert exc_info.value.status_code == 400

    def test_available_providers(self):
        assert ProviderFactory.get_available_providers() == ["gemini", "rule_based"]
