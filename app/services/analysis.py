"""
Analysis service for the movie review sentiment service.

This module holds the fallback boundary of the application. It asks the
primary provider (normally Gemini) for a verdict and, when that provider is
not configured, fails, or answers with something unusable, substitutes the
rule-based scorer's result instead of propagating the failure to the caller.
"""

import time
from typing import Any, Dict

from app.core.config import Settings
from app.core.logging import get_logger, log_provider_operation
from app.interfaces.analysis_interface import IAnalysisService
from app.models.base import AnalysisResult, SentimentProvider
from app.monitoring.prometheus import record_analysis, record_fallback, record_provider_duration
from app.utils.exceptions import (
    ProviderError,
    ProviderNotConfiguredError,
    ProviderRequestError,
    ProviderResponseError,
    TextEmptyError,
    TextTooLongError,
)

logger = get_logger(__name__)


def _fallback_reason(error: Exception) -> str:
    if isinstance(error, ProviderNotConfiguredError):
        return "not_configured"
    if isinstance(error, ProviderRequestError):
        return "request_error"
    if isinstance(error, ProviderResponseError):
        return "malformed_response"
    if isinstance(error, ProviderError):
        return "provider_error"
    return "unexpected_error"


class AnalysisService(IAnalysisService):
    """Orchestrates sentiment analysis with a primary and a fallback provider.

    Attributes:
        primary: The preferred provider.
        fallback: The provider used when the primary one cannot answer. It
            must never fail (the rule-based provider).
        settings: The application's configuration settings.
    """

    def __init__(
        self,
        primary: SentimentProvider,
        fallback: SentimentProvider,
        settings: Settings,
    ):
        self.primary = primary
        self.fallback = fallback
        self.settings = settings

    async def analyze(self, text: str) -> AnalysisResult:
        """Analyzes `text`, falling back to the rule-based scorer if needed.

        Args:
            text: The input text to be analyzed.

        Returns:
            The analysis result. Its `provider` field tells which provider
            produced it.

        Raises:
            TextEmptyError: If the input text is empty or whitespace.
            TextTooLongError: If the input text exceeds the configured max length.
        """
        if not text or not text.strip():
            raise TextEmptyError()
        max_length = self.settings.provider.max_text_length
        if len(text) > max_length:
            raise TextTooLongError(len(text), max_length)

        result = await self._analyze_with_fallback(text)
        record_analysis(result.provider, result.sentiment, result.confidence, len(text))
        return result

    async def _analyze_with_fallback(self, text: str) -> AnalysisResult:
        if self.primary is self.fallback or self.primary.name == self.fallback.name:
            return await self.fallback.analyze(text)

        if not self.primary.is_available():
            record_fallback(self.primary.name, "not_configured")
            logger.debug("Primary provider not configured, using fallback", provider=self.primary.name)
            return await self.fallback.analyze(text)

        start_time = time.time()
        try:
            result = await self.primary.analyze(text)
        except Exception as e:
            duration = time.time() - start_time
            reason = _fallback_reason(e)
            record_fallback(self.primary.name, reason)
            log_provider_operation(
                logger,
                operation="analyze",
                provider=self.primary.name,
                duration_ms=duration * 1000,
                success=False,
                error=str(e) or type(e).__name__,
                fallback_provider=self.fallback.name,
                reason=reason,
                exc_info=not isinstance(e, ProviderError),
            )
            return await self.fallback.analyze(text)

        duration = time.time() - start_time
        record_provider_duration(self.primary.name, duration)
        log_provider_operation(
            logger,
            operation="analyze",
            provider=self.primary.name,
            duration_ms=duration * 1000,
            sentiment=result.sentiment,
        )
        return result

    def get_service_info(self) -> Dict[str, Any]:
        return {
            "primary": self.primary.get_provider_info(),
            "fallback": self.fallback.get_provider_info(),
            "ai_enabled": self.primary.is_available() and self.primary.name != self.fallback.name,
        }

    async def aclose(self) -> None:
        """Closes both providers."""
        await self.primary.aclose()
        if self.fallback is not self.primary:
            await self.fallback.aclose()
