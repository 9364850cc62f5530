"""
Gemini-backed sentiment provider.

This module talks to the Google Generative Language REST API with `httpx`.
The model is asked for a JSON verdict, and the first JSON object in its answer
is parsed into an `AnalysisResult`. Missing credentials, transport failures
and malformed answers are reported as `ProviderError` subclasses so that the
analysis service can fall back to the rule-based scorer.
"""

import json
import math
import re
import time
from typing import Any, Dict, List, Optional

import httpx

from app.core.logging import get_logger
from app.ml.rule_based import tokenize
from app.models.base import AnalysisDetails, AnalysisResult, make_preview
from app.utils.exceptions import (
    ProviderNotConfiguredError,
    ProviderRequestError,
    ProviderResponseError,
)

logger = get_logger(__name__)

SENTIMENT_PROMPT = """You are an expert sentiment analysis AI. Analyze the following movie review and provide a detailed sentiment analysis.

Respond in valid JSON format with the following structure:
{
  "sentiment": "positive|negative|neutral",
  "confidence": <number between 0-100>,
  "intensity": <number between 1-10>,
  "emotions": ["emotion1", "emotion2"],
  "explanation": "detailed analysis of why this sentiment was determined",
  "context_understanding": "analysis of context, sarcasm, or complex language patterns",
  "key_phrases": ["phrase1", "phrase2"]
}

Rules:
- Be accurate and nuanced in your analysis
- Consider context, sarcasm, and complex emotions
- Provide confidence scores based on certainty
- Identify key emotional indicators
- Explain your reasoning clearly

Text to analyze: """

DEFAULT_CONFIDENCE = 50
DEFAULT_INTENSITY = 5
DEFAULT_EXPLANATION = "AI-powered sentiment analysis completed"
VALID_SENTIMENTS = ("positive", "negative", "neutral")

_JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


class GeminiProvider:
    """Sentiment provider that delegates to a hosted Gemini model.

    Attributes:
        name: The provider name reported in results.
        api_key: The Gemini API key, or None when not configured.
        model: The Gemini model identifier.
        api_base: Base URL of the Generative Language API.
        timeout: Request timeout in seconds.
        preview_length: Number of characters of the text echoed in results.
    """

    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-2.0-flash",
        api_base: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 15.0,
        preview_length: int = 100,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initializes the provider.

        Args:
            api_key: The Gemini API key. Without it the provider is unavailable.
            model: The Gemini model identifier.
            api_base: Base URL of the Generative Language API.
            timeout: Request timeout in seconds.
            preview_length: Number of characters of the text echoed in results.
            client: An optional pre-built HTTP client (used by tests).
        """
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.preview_length = preview_length
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, settings) -> "GeminiProvider":
        """Builds the provider from the application settings."""
        return cls(
            api_key=settings.provider.gemini_api_key,
            model=settings.provider.gemini_model,
            api_base=settings.provider.gemini_api_base,
            timeout=settings.provider.request_timeout_seconds,
            preview_length=settings.provider.preview_length,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def is_available(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def analyze(self, text: str) -> AnalysisResult:
        """Asks Gemini for a sentiment verdict on `text`.

        Args:
            text: The input text to analyze.

        Returns:
            The parsed analysis result.

        Raises:
            ProviderNotConfiguredError: If no API key is configured.
            ProviderRequestError: If the HTTP request fails.
            ProviderResponseError: If the answer cannot be parsed.
        """
        if not self.is_available():
            raise ProviderNotConfiguredError(self.name)

        payload = {"contents": [{"parts": [{"text": f'{SENTIMENT_PROMPT}"{text}"'}]}]}
        start_time = time.time()

        try:
            response = await self._get_client().post(
                self.endpoint,
                json=payload,
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(
                f"Gemini API returned HTTP {e.response.status_code}",
                provider=self.name,
                context={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise ProviderRequestError(
                f"Gemini API request failed: {type(e).__name__}",
                provider=self.name,
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise ProviderResponseError("Gemini API returned a non-JSON body", self.name) from e

        parsed = parse_verdict(extract_candidate_text(body))
        duration_ms = (time.time() - start_time) * 1000
        logger.debug("Gemini verdict parsed", model=self.model, duration_ms=round(duration_ms, 2))

        return self._to_analysis_result(text, parsed)

    def _to_analysis_result(self, text: str, parsed: Dict[str, Any]) -> AnalysisResult:
        sentiment = parsed["sentiment"]
        confidence = parsed["confidence"]
        return AnalysisResult(
            text=make_preview(text, self.preview_length),
            sentiment=sentiment,
            confidence=confidence,
            explanation=parsed["explanation"],
            details=AnalysisDetails(
                positive_score=confidence if sentiment == "positive" else 0,
                negative_score=confidence if sentiment == "negative" else 0,
                word_count=len(tokenize(text)),
            ),
            provider=self.name,
            ai_powered=True,
            intensity=parsed["intensity"],
            emotions=parsed["emotions"],
            context_understanding=parsed["context_understanding"],
            key_phrases=parsed["key_phrases"],
        )

    def get_provider_info(self) -> Dict[str, Any]:
        return {
            "provider": self.name,
            "available": self.is_available(),
            "model": self.model,
        }

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


def extract_candidate_text(body: Any) -> str:
    """Returns the text of the first candidate in a generateContent response.

    Raises:
        ProviderResponseError: If the response has no candidate text.
    """
    try:
        parts = body["candidates"][0]["content"]["parts"]
        text = "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise ProviderResponseError("Gemini response has no candidate text", "gemini") from e
    if not text.strip():
        raise ProviderResponseError("Gemini response candidate is empty", "gemini")
    return text


def parse_verdict(response_text: str) -> Dict[str, Any]:
    """Parses the JSON verdict embedded in a model answer.

    The first `{...}` block is decoded. Missing optional fields receive
    defaults, confidence is clamped to 0-100 and intensity to 1-10.

    Args:
        response_text: The raw text produced by the model.

    Returns:
        A normalized dictionary with every verdict field present.

    Raises:
        ProviderResponseError: If no JSON object is found, it does not decode,
            or its sentiment label is not recognized.
    """
    match = _JSON_OBJECT_PATTERN.search(response_text)
    if not match:
        raise ProviderResponseError("Invalid JSON response from Gemini", "gemini")

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ProviderResponseError("Invalid JSON response from Gemini", "gemini") from e

    if not isinstance(data, dict):
        raise ProviderResponseError("Gemini verdict is not a JSON object", "gemini")

    sentiment = str(data.get("sentiment", "")).strip().lower()
    if sentiment not in VALID_SENTIMENTS:
        raise ProviderResponseError(
            f"Unrecognized sentiment label from Gemini: {data.get('sentiment')!r}",
            "gemini",
        )

    return {
        "sentiment": sentiment,
        "confidence": _clamped_int(data.get("confidence"), DEFAULT_CONFIDENCE, 0, 100),
        "intensity": _clamped_int(data.get("intensity"), DEFAULT_INTENSITY, 1, 10),
        "emotions": _string_list(data.get("emotions")),
        "explanation": str(data.get("explanation") or DEFAULT_EXPLANATION),
        "context_understanding": str(data.get("context_understanding") or ""),
        "key_phrases": _string_list(data.get("key_phrases")),
    }


def _clamped_int(value: Any, default: int, lower: int, upper: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(min(max(round(number), lower), upper))


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]
