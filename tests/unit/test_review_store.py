"""Tests for the SQLite review store."""

import sqlite3
import threading

import pytest

from app.services.review_store import ReviewStore
from app.utils.exceptions import StorageError
from tests.fixtures.common_mocks import make_analysis_result


@pytest.mark.unit
class TestReviewStore:
    """Tests for saving and querying reviews."""

    def test_save_and_fetch_by_id(self, review_store):
        result = make_analysis_result(sentiment="positive", confidence=88)

        review_id = review_store.save_review("A wonderful film", result)
        review = review_store.get_review_by_id(review_id)

        assert review["id"] == review_id
        assert review["review_text"] == "A wonderful film"
        assert review["sentiment"] == "positive"
        assert review["confidence"] == 88
        assert review["positive_score"] == 88
        assert review["negative_score"] == 0
        assert review["word_count"] == 3
        assert review["provider"] == "fake_ai"
        assert review["ai_powered"] is True
        assert review["created_at"]

    def test_missing_review_returns_none(self, review_store):
        assert review_store.get_review_by_id(12345) is None

    def test_recent_reviews_newest_first(self, review_store):
        ids = [
            review_store.save_review(f"review {i}", make_analysis_result())
            for i in range(5)
        ]

        reviews = review_store.get_recent_reviews(limit=3)

        assert [review["id"] for review in reviews] == list(reversed(ids))[:3]

    def test_recent_reviews_empty(self, review_store):
        assert review_store.get_recent_reviews() == []

    def test_stats_on_empty_store(self, review_store):
        assert review_store.get_stats() == {
            "total_reviews": 0,
            "positive_count": 0,
            "negative_count": 0,
            "neutral_count": 0,
            "avg_confidence": None,
        }

    def test_stats_counts_and_average(self, review_store):
        review_store.save_review("a", make_analysis_result(sentiment="positive", confidence=100))
        review_store.save_review("b", make_analysis_result(sentiment="positive", confidence=67))
        review_store.save_review("c", make_analysis_result(sentiment="negative", confidence=50))

        stats = review_store.get_stats()

        assert stats["total_reviews"] == 3
        assert stats["positive_count"] == 2
        assert stats["negative_count"] == 1
        assert stats["neutral_count"] == 0
        assert stats["avg_confidence"] == 72.33

    def test_persists_across_reopen(self, tmp_path):
        path = str(tmp_path / "nested" / "reviews.db")
        store = ReviewStore(path)
        store.init()
        review_id = store.save_review("kept", make_analysis_result())
        store.close()

        reopened = ReviewStore(path)
        reopened.init()
        try:
            assert reopened.get_review_by_id(review_id)["review_text"] == "kept"
        finally:
            reopened.close()

    def test_in_memory_database(self):
        store = ReviewStore(":memory:")
        store.init()

        store.save_review("x", make_analysis_result())

        assert store.get_stats()["total_reviews"] == 1
        store.close()

    def test_closed_store_raises(self, tmp_path):
        store = ReviewStore(str(tmp_path / "closed.db"))

        with pytest.raises(StorageError):
            store.save_review("x", make_analysis_result())

        store.init()
        store.close()
        assert store.is_open is False
        with pytest.raises(StorageError):
            store.get_recent_reviews()

    def test_sqlite_error_becomes_storage_error(self, review_store):
        review_store._conn.execute("DROP TABLE reviews")

        with pytest.raises(StorageError) as exc_info:
            review_store.get_stats()

        assert isinstance(exc_info.value.__cause__, sqlite3.Error)

    def test_init_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        store = ReviewStore(str(blocker / "reviews.db"))

        with pytest.raises(StorageError):
            store.init()

    def test_concurrent_saves(self, review_store):
        def save_many():
            for i in range(20):
                review_store.save_review(f"text {i}", make_analysis_result())

        threads = [threading.Thread(target=save_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert review_store.get_stats()["total_reviews"] == 80
