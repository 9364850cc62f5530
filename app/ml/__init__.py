"""
Lexical sentiment scoring.
"""

from app.ml.rule_based import ScoreResult, Sentiment, score, tokenize

__all__ = ["ScoreResult", "Sentiment", "score", "tokenize"]
