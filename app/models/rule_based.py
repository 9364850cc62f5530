"""
Rule-based sentiment provider.

Adapts the lexical scorer in `app.ml.rule_based` to the `SentimentProvider`
interface. It needs no credentials and never fails, which makes it the
fallback for every other provider.
"""

import math
from typing import Any, Dict

from app.ml.lexicon import get_lexicon_info
from app.ml.rule_based import ScoreResult, score
from app.models.base import AnalysisDetails, AnalysisResult, make_preview

CONTEXT_NOTE = "Lexicon-based keyword analysis with negation handling"


class RuleBasedProvider:
    """Sentiment provider backed by the lexical scorer.

    Attributes:
        name: The provider name reported in results.
        preview_length: Number of characters of the text echoed in results.
    """

    name = "rule_based"

    def __init__(self, preview_length: int = 100):
        self.preview_length = preview_length

    def is_available(self) -> bool:
        return True

    def analyze_sync(self, text: str) -> AnalysisResult:
        """Scores `text` and wraps the score in an `AnalysisResult`."""
        return self.to_analysis_result(text, score(text))

    async def analyze(self, text: str) -> AnalysisResult:
        return self.analyze_sync(text)

    def to_analysis_result(self, text: str, result: ScoreResult) -> AnalysisResult:
        """Maps a `ScoreResult` onto the provider-independent result model.

        Intensity grows with confidence (one step per 15 points, at least 1).
        """
        sentiment = result.sentiment.value
        return AnalysisResult(
            text=make_preview(text or "", self.preview_length),
            sentiment=sentiment,
            confidence=result.confidence,
            explanation=result.explanation,
            details=AnalysisDetails(
                positive_score=result.positive_score,
                negative_score=result.negative_score,
                word_count=result.word_count,
            ),
            provider=self.name,
            ai_powered=False,
            intensity=max(1, math.ceil(result.confidence / 15)),
            emotions=[sentiment],
            context_understanding=CONTEXT_NOTE,
            key_phrases=[],
        )

    def get_provider_info(self) -> Dict[str, Any]:
        return {"provider": self.name, "available": True, **get_lexicon_info()}

    async def aclose(self) -> None:
        return None
