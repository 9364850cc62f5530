"""
Base protocol and result model for sentiment providers.

This module defines the SentimentProvider protocol, which provides a common
interface for every sentiment backend (the lexical scorer, the Gemini API),
and the AnalysisResult model that all of them return. The analysis service
only depends on this interface, so providers are interchangeable.
"""

from datetime import datetime, timezone
from typing import Any, List, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisDetails(BaseModel):
    """Raw counts behind an analysis result."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    positive_score: int = Field(default=0, ge=0)
    negative_score: int = Field(default=0, ge=0)
    word_count: int = Field(default=0, ge=0)


class AnalysisResult(BaseModel):
    """The sentiment analysis of one passage, as returned to API clients.

    Field names are serialized in camelCase (`aiPowered`, `keyPhrases`, ...).

    Attributes:
        text: A preview of the analyzed text.
        sentiment: positive, negative or neutral.
        confidence: Confidence percentage (0-100).
        explanation: Human-readable reasoning for the label.
        details: Raw counts behind the result.
        timestamp: UTC time of the analysis in ISO-8601 format.
        provider: The provider that produced the result.
        ai_powered: Whether a language model produced the result.
        intensity: Emotional intensity on a 1-10 scale.
        emotions: Emotions detected in the text.
        context_understanding: Notes on context, sarcasm or method.
        key_phrases: Phrases that drove the result.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str
    sentiment: str = Field(..., pattern=r"^(positive|negative|neutral)$")
    confidence: int = Field(..., ge=0, le=100)
    explanation: str
    details: AnalysisDetails = Field(default_factory=AnalysisDetails)
    timestamp: str = Field(default_factory=lambda: utc_timestamp())
    provider: str
    ai_powered: bool = False
    intensity: int = Field(default=1, ge=1, le=10)
    emotions: List[str] = Field(default_factory=list)
    context_understanding: str = ""
    key_phrases: List[str] = Field(default_factory=list)


def utc_timestamp() -> str:
    """Returns the current UTC time in ISO-8601 format."""
    return datetime.now(timezone.utc).isoformat()


def make_preview(text: str, length: int = 100) -> str:
    """Truncates text to `length` characters, marking truncation with '...'."""
    if len(text) > length:
        return text[:length] + "..."
    return text


@runtime_checkable
class SentimentProvider(Protocol):
    """Protocol defining the interface for sentiment providers.

    All implementations must provide methods for:
    - Checking whether the provider can be used (credentials present)
    - Analyzing a single text
    - Describing themselves and releasing resources
    """

    name: str

    def is_available(self) -> bool:
        """Check if the provider is configured and can serve requests.

        Returns:
            True if the provider can be used, False otherwise.
        """
        ...

    async def analyze(self, text: str) -> AnalysisResult:
        """Analyze the sentiment of a single text.

        Args:
            text: The input text to analyze.

        Returns:
            The analysis result.

        Raises:
            ProviderError: If the provider cannot produce a result.
        """
        ...

    def get_provider_info(self) -> dict[str, Any]:
        """Get information about the provider, such as its name and model."""
        ...

    async def aclose(self) -> None:
        """Release any resources (HTTP clients) held by the provider."""
        ...
