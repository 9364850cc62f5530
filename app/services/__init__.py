"""Business logic service exports."""

from app.services.analysis import AnalysisService
from app.services.review_store import ReviewStore

__all__ = ["AnalysisService", "ReviewStore"]
