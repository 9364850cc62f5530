"""Tests for the sentiment lexicons."""

import pytest

from app.ml.lexicon import NEGATION_WORDS, NEGATIVE_WORDS, POSITIVE_WORDS, get_lexicon_info
from app.ml.rule_based import tokenize


@pytest.mark.unit
class TestLexicon:
    """Tests for the content and shape of the word sets."""

    def test_positive_and_negative_are_disjoint(self):
        assert not POSITIVE_WORDS & NEGATIVE_WORDS

    def test_negation_is_disjoint_from_sentiment_words(self):
        assert not NEGATION_WORDS & POSITIVE_WORDS
        assert not NEGATION_WORDS & NEGATIVE_WORDS

    @pytest.mark.parametrize("words", [POSITIVE_WORDS, NEGATIVE_WORDS, NEGATION_WORDS])
    def test_entries_are_normalized_tokens(self, words):
        """Every entry must survive tokenization unchanged, or it could never match."""
        for word in words:
            assert tokenize(word) == [word]

    def test_sets_are_immutable(self):
        assert isinstance(POSITIVE_WORDS, frozenset)
        assert isinstance(NEGATIVE_WORDS, frozenset)
        assert isinstance(NEGATION_WORDS, frozenset)

    def test_expected_words_present(self):
        assert {"masterpiece", "hilarious", "good"} <= POSITIVE_WORDS
        assert {"overrated", "cringe", "boring"} <= NEGATIVE_WORDS
        assert {"not", "never", "barely", "hardly"} <= NEGATION_WORDS

    def test_lexicon_info_reports_sizes(self):
        info = get_lexicon_info()

        assert info == {
            "positive_words": len(POSITIVE_WORDS),
            "negative_words": len(NEGATIVE_WORDS),
            "negation_words": len(NEGATION_WORDS),
        }
