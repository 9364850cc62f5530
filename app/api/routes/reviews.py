"""
Stored review endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from app.api.schemas.responses import ReviewListResponse, ReviewResponse, StatsResponse
from app.core.config import Settings
from app.core.dependencies import get_app_settings, get_review_store
from app.interfaces import IReviewStore
from app.utils.exceptions import ReviewNotFoundError

router = APIRouter()

MAX_LIMIT = 100


@router.get(
    "/reviews",
    response_model=ReviewListResponse,
    summary="List recent reviews",
    description="Return the most recently analyzed reviews, newest first.",
)
def list_reviews(
    limit: Optional[int] = Query(None, ge=1, le=MAX_LIMIT, description="Number of reviews to return (1-100)"),
    review_store: IReviewStore = Depends(get_review_store),
    settings: Settings = Depends(get_app_settings),
) -> ReviewListResponse:
    """Lists the most recent reviews.

    Args:
        limit: Maximum number of reviews to return. Defaults to the
            configured default (10) and is capped by the configured maximum.
        review_store: The review store, injected as a dependency.
        settings: The application's configuration settings.

    Returns:
        A `ReviewListResponse` with up to `limit` reviews.
    """
    if limit is None:
        limit = settings.storage.default_reviews_limit
    limit = min(limit, settings.storage.max_reviews_limit)
    return ReviewListResponse(data=review_store.get_recent_reviews(limit))


@router.get(
    "/reviews/{review_id}",
    response_model=ReviewResponse,
    summary="Get a stored review",
    responses={404: {"description": "Review not found"}},
)
def get_review(
    review_id: int = Path(..., ge=1),
    review_store: IReviewStore = Depends(get_review_store),
) -> ReviewResponse:
    review = review_store.get_review_by_id(review_id)
    if review is None:
        raise ReviewNotFoundError(review_id)
    return ReviewResponse(data=review)


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Review statistics",
    description="Counts per sentiment and the average confidence of stored reviews.",
)
def get_stats(review_store: IReviewStore = Depends(get_review_store)) -> StatsResponse:
    return StatsResponse(data=review_store.get_stats())
