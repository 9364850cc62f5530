"""
SQLite persistence for analyzed reviews.

The store keeps one `reviews` table with the analyzed text, the verdict and
the provider/timestamp metadata of each analysis. A single connection is
shared behind a lock, so the store can be used from FastAPI's threadpool.
"""

import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.core.logging import get_logger
from app.interfaces.storage_interface import IReviewStore
from app.models.base import AnalysisResult
from app.utils.exceptions import StorageError

logger = get_logger(__name__)

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS reviews (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        review_text TEXT NOT NULL,
        sentiment TEXT NOT NULL,
        confidence INTEGER NOT NULL,
        positive_score INTEGER NOT NULL,
        negative_score INTEGER NOT NULL,
        word_count INTEGER NOT NULL,
        explanation TEXT NOT NULL,
        provider TEXT NOT NULL,
        ai_powered INTEGER NOT NULL DEFAULT 0,
        created_at TEXT NOT NULL
    )
"""

REVIEW_COLUMNS = """
    id, review_text, sentiment, confidence, positive_score, negative_score,
    word_count, explanation, provider, ai_powered, created_at
"""


def _row_to_review(row: sqlite3.Row) -> Dict[str, Any]:
    review = dict(row)
    review["ai_powered"] = bool(review["ai_powered"])
    return review


class ReviewStore(IReviewStore):
    """Stores analyzed reviews in a SQLite database.

    Attributes:
        database_path: Path to the SQLite file, or ':memory:'.
    """

    def __init__(self, database_path: str):
        self.database_path = database_path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def init(self) -> None:
        """Opens the database and creates the `reviews` table if missing."""
        if self._conn is not None:
            return
        try:
            if self.database_path != ":memory:":
                Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.database_path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            with conn:
                conn.execute(CREATE_TABLE_SQL)
        except (sqlite3.Error, OSError) as e:
            raise StorageError(
                f"Failed to initialize review store: {e}",
                context={"database_path": self.database_path},
            ) from e
        self._conn = conn
        logger.info("Review store initialized", database_path=self.database_path)

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Review store closed")

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Review store is not initialized")
        return self._conn

    def save_review(self, review_text: str, result: AnalysisResult) -> int:
        """Persists an analysis and returns the new review id.

        Raises:
            StorageError: If the store is closed or the insert fails.
        """
        params = (
            review_text,
            result.sentiment,
            result.confidence,
            result.details.positive_score,
            result.details.negative_score,
            result.details.word_count,
            result.explanation,
            result.provider,
            int(result.ai_powered),
            datetime.now(timezone.utc).isoformat(),
        )
        with self._lock:
            conn = self._connection()
            try:
                with conn:
                    cursor = conn.execute(
                        """
                        INSERT INTO reviews (
                            review_text, sentiment, confidence, positive_score,
                            negative_score, word_count, explanation, provider,
                            ai_powered, created_at
                        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                        """,
                        params,
                    )
            except sqlite3.Error as e:
                raise StorageError(f"Failed to save review: {e}") from e
            return cursor.lastrowid

    def get_recent_reviews(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Returns up to `limit` reviews, newest first."""
        with self._lock:
            conn = self._connection()
            try:
                rows = conn.execute(
                    f"SELECT {REVIEW_COLUMNS} FROM reviews "
                    "ORDER BY created_at DESC, id DESC LIMIT ?",
                    (limit,),
                ).fetchall()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to fetch reviews: {e}") from e
        return [_row_to_review(row) for row in rows]

    def get_review_by_id(self, review_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            conn = self._connection()
            try:
                row = conn.execute(
                    f"SELECT {REVIEW_COLUMNS} FROM reviews WHERE id = ?",
                    (review_id,),
                ).fetchone()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to fetch review {review_id}: {e}") from e
        return _row_to_review(row) if row is not None else None

    def get_stats(self) -> Dict[str, Any]:
        """Aggregates review counts per sentiment and the average confidence.

        `avg_confidence` is None when the store is empty, otherwise it is
        rounded to two decimals.
        """
        with self._lock:
            conn = self._connection()
            try:
                row = conn.execute(
                    """
                    SELECT
                        COUNT(*) AS total_reviews,
                        COUNT(CASE WHEN sentiment = 'positive' THEN 1 END) AS positive_count,
                        COUNT(CASE WHEN sentiment = 'negative' THEN 1 END) AS negative_count,
                        COUNT(CASE WHEN sentiment = 'neutral' THEN 1 END) AS neutral_count,
                        AVG(confidence) AS avg_confidence
                    FROM reviews
                    """
                ).fetchone()
            except sqlite3.Error as e:
                raise StorageError(f"Failed to compute review statistics: {e}") from e

        stats = dict(row)
        if stats["avg_confidence"] is not None:
            stats["avg_confidence"] = round(stats["avg_confidence"], 2)
        return stats
