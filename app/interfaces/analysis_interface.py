"""
Interface for Analysis Service

Defines the contract for sentiment analysis services.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from app.models.base import AnalysisResult


class IAnalysisService(ABC):
    """
    Interface for sentiment analysis services.

    Implementations decide which provider answers a request and must never
    surface provider failures to the caller.
    """

    @abstractmethod
    async def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze the sentiment of a single text.

        Args:
            text: Input text to analyze

        Returns:
            The analysis result from the primary provider, or from the
            fallback provider when the primary one is unavailable or fails.

        Raises:
            TextEmptyError: If text is empty
            TextTooLongError: If text exceeds the configured limit
        """
        pass

    @abstractmethod
    def get_service_info(self) -> Dict[str, Any]:
        """
        Describe the configured providers.

        Returns:
            Dictionary with the primary and fallback provider details
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """
        Release resources held by the providers (HTTP clients).
        """
        pass
