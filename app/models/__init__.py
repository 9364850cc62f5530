"""
Sentiment provider implementations.

This package contains the provider implementations and the factory for
creating them. Providers share the `SentimentProvider` protocol, so the
rule-based scorer and the Gemini API can be used interchangeably.
"""

from app.models.base import AnalysisDetails, AnalysisResult, SentimentProvider
from app.models.factory import ProviderFactory

__all__ = ["AnalysisDetails", "AnalysisResult", "SentimentProvider", "ProviderFactory"]
