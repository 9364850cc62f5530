"""
Response schemas for API endpoints.

Responses follow the `{success, data}` envelope used by the review frontend.
Field names are serialized in camelCase where the frontend expects it.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.base import AnalysisResult


class AnalyzeResponse(BaseModel):
    """Defines the schema for the result of `POST /api/analyze`.

    Attributes:
        success: Always true for a completed analysis.
        data: The analysis result.
        review_id: Id of the stored review, or None if it could not be saved.

    Example:
        ```json
        {
            "success": true,
            "data": {"sentiment": "positive", "confidence": 100, "...": "..."},
            "reviewId": 42
        }
        ```
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    data: AnalysisResult
    review_id: Optional[int] = None


class ReviewRecord(BaseModel):
    """A stored review as returned by the review endpoints."""

    id: int
    review_text: str
    sentiment: str
    confidence: int
    positive_score: int
    negative_score: int
    word_count: int
    explanation: str
    provider: str
    ai_powered: bool
    created_at: str


class ReviewListResponse(BaseModel):
    success: bool = True
    data: List[ReviewRecord]


class ReviewResponse(BaseModel):
    success: bool = True
    data: ReviewRecord


class ReviewStats(BaseModel):
    """Aggregate statistics over all stored reviews.

    Attributes:
        avg_confidence: Mean confidence rounded to two decimals, or None when
            no reviews are stored.
    """

    total_reviews: int = Field(..., ge=0)
    positive_count: int = Field(..., ge=0)
    negative_count: int = Field(..., ge=0)
    neutral_count: int = Field(..., ge=0)
    avg_confidence: Optional[float] = None


class StatsResponse(BaseModel):
    success: bool = True
    data: ReviewStats


class HealthResponse(BaseModel):
    """Defines the schema for the service's health check response.

    Attributes:
        status: Overall service status.
        service: The service name.
        version: Application version number.
        provider: The configured primary provider.
        ai_enabled: Whether the primary provider is an AI provider with
            credentials configured.
        timestamp: UTC time of the check in ISO-8601 format.

    Example:
        ```json
        {
            "status": "healthy",
            "service": "Sentiment Analysis API",
            "version": "1.0.0",
            "provider": "gemini",
            "ai_enabled": true,
            "timestamp": "2024-01-01T12:00:00+00:00"
        }
        ```
    """

    status: str = Field(..., examples=["healthy"])
    service: str
    version: str
    provider: str
    ai_enabled: bool
    timestamp: str
