"""
Pydantic schemas for API requests and responses.
"""

from app.api.schemas.requests import AnalyzeRequest
from app.api.schemas.responses import (
    AnalyzeResponse,
    HealthResponse,
    ReviewListResponse,
    ReviewRecord,
    ReviewResponse,
    ReviewStats,
    StatsResponse,
)

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "HealthResponse",
    "ReviewListResponse",
    "ReviewRecord",
    "ReviewResponse",
    "ReviewStats",
    "StatsResponse",
]
