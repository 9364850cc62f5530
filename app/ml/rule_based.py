"""
Rule-based sentiment scoring for short free-text passages.

This module implements the lexical scorer that backs the service: the text is
tokenized, each token is matched against the positive and negative lexicons,
and a single negation flag inverts the polarity of the next sentiment word.
The scorer is a pure function with no shared mutable state, so it can be
called concurrently from any number of request handlers or worker threads.
"""

import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from app.ml.lexicon import NEGATION_WORDS, NEGATIVE_WORDS, POSITIVE_WORDS

_NON_WORD_PATTERN = re.compile(r"[^\w\s]|_")
_WHITESPACE_PATTERN = re.compile(r"\s+")

NO_TEXT_EXPLANATION = "No text provided for analysis"
NO_INDICATORS_EXPLANATION = "No sentiment indicators found in the text"
TIE_CONFIDENCE = 50


class Sentiment(str, Enum):
    """Sentiment labels produced by the scorer and the providers."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ScoreResult:
    """The outcome of scoring a single passage.

    Attributes:
        sentiment: The overall sentiment label.
        confidence: Share of the dominant polarity among matched words (0-100).
        positive_score: Number of tokens counted as positive.
        negative_score: Number of tokens counted as negative.
        word_count: Number of tokens after preprocessing.
        explanation: A human-readable summary of the counts.
    """

    sentiment: Sentiment
    confidence: int
    positive_score: int
    negative_score: int
    word_count: int
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["sentiment"] = self.sentiment.value
        return result


def tokenize(text: Optional[str]) -> List[str]:
    """Splits text into lowercase word tokens.

    Every character that is not a letter, digit or whitespace is replaced by a
    space, whitespace runs are collapsed, and empty tokens are dropped.

    Args:
        text: The raw input text.

    Returns:
        The ordered list of tokens. Empty for empty or whitespace-only input.
    """
    if not text:
        return []
    cleaned = _NON_WORD_PATTERN.sub(" ", text.lower())
    cleaned = _WHITESPACE_PATTERN.sub(" ", cleaned).strip()
    return [token for token in cleaned.split(" ") if token]


def _round_half_up_percent(part: int, total: int) -> int:
    # Integer arithmetic keeps x.5 cases exact: 5/8 -> 63, not 62.
    return (200 * part + total) // (2 * total)


def score(text: Optional[str]) -> ScoreResult:
    """Scores the sentiment of a passage using the lexicons.

    Tokens are scanned left to right with one negation flag:

    1. A negation word sets the flag and is not scored. It never clears it.
    2. A positive word counts as negative when the flag is set (clearing the
       flag), otherwise as positive.
    3. A negative word counts as positive when the flag is set (clearing the
       flag), otherwise as negative.
    4. Any other word clears the flag, so "not really good" stays positive
       while "not good" is negative.

    The function is total: every input, including an empty string, yields a
    result and nothing is raised.

    Args:
        text: The passage to score.

    Returns:
        A `ScoreResult` with the label, confidence and raw counts.
    """
    if not text or not text.strip():
        return ScoreResult(Sentiment.NEUTRAL, 0, 0, 0, 0, NO_TEXT_EXPLANATION)

    words = tokenize(text)
    if not words:
        return ScoreResult(Sentiment.NEUTRAL, 0, 0, 0, 0, NO_TEXT_EXPLANATION)

    positive_score = 0
    negative_score = 0
    negation_flag = False

    for word in words:
        if word in NEGATION_WORDS:
            negation_flag = True
            continue

        if word in POSITIVE_WORDS:
            if negation_flag:
                negative_score += 1
                negation_flag = False
            else:
                positive_score += 1
        elif word in NEGATIVE_WORDS:
            if negation_flag:
                positive_score += 1
                negation_flag = False
            else:
                negative_score += 1
        else:
            negation_flag = False

    total_score = positive_score + negative_score

    if total_score == 0:
        sentiment = Sentiment.NEUTRAL
        confidence = 0
        explanation = NO_INDICATORS_EXPLANATION
    elif positive_score > negative_score:
        sentiment = Sentiment.POSITIVE
        confidence = _round_half_up_percent(positive_score, total_score)
        explanation = (
            f"Found {positive_score} positive words and {negative_score} negative words"
        )
    elif negative_score > positive_score:
        sentiment = Sentiment.NEGATIVE
        confidence = _round_half_up_percent(negative_score, total_score)
        explanation = (
            f"Found {negative_score} negative words and {positive_score} positive words"
        )
    else:
        sentiment = Sentiment.NEUTRAL
        confidence = TIE_CONFIDENCE
        explanation = (
            f"Equal positive ({positive_score}) and negative ({negative_score}) words found"
        )

    return ScoreResult(
        sentiment=sentiment,
        confidence=confidence,
        positive_score=positive_score,
        negative_score=negative_score,
        word_count=len(words),
        explanation=explanation,
    )
