"""
Interface for Review Store

Defines the contract for review persistence services.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.models.base import AnalysisResult


class IReviewStore(ABC):
    """
    Interface for review persistence services.

    Stores analyzed reviews with their provider and timestamp metadata.
    """

    @abstractmethod
    def init(self) -> None:
        """
        Open the store and create its schema if missing.

        Raises:
            StorageError: If the store cannot be opened
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Close the store. Further calls require `init()` again.
        """
        pass

    @abstractmethod
    def save_review(self, review_text: str, result: AnalysisResult) -> int:
        """
        Persist an analyzed review.

        Args:
            review_text: The full text that was analyzed
            result: The analysis result

        Returns:
            The id of the stored review

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def get_recent_reviews(self, limit: int = 10) -> List[Dict[str, Any]]:
        """
        List the most recent reviews, newest first.

        Args:
            limit: Maximum number of reviews to return
        """
        pass

    @abstractmethod
    def get_review_by_id(self, review_id: int) -> Optional[Dict[str, Any]]:
        """
        Fetch a single review, or None if it does not exist.
        """
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """
        Aggregate counts per sentiment and the average confidence.
        """
        pass
