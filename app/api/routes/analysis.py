"""
Review analysis endpoint.

`POST /analyze` runs the analysis service (AI provider with rule-based
fallback) and stores the result. Storing is best effort: if the review store
fails, the analysis is still returned with a null `reviewId`.
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends

from app.api.schemas.requests import AnalyzeRequest
from app.api.schemas.responses import AnalyzeResponse
from app.core.dependencies import get_analysis_service, get_review_store
from app.core.logging import get_contextual_logger
from app.interfaces import IAnalysisService, IReviewStore
from app.models.base import AnalysisResult
from app.monitoring.prometheus import record_review_stored
from app.utils.exceptions import StorageError

router = APIRouter()


async def _store_review(
    review_store: IReviewStore, text: str, result: AnalysisResult, logger
) -> Optional[int]:
    try:
        review_id = await asyncio.to_thread(review_store.save_review, text, result)
    except StorageError as e:
        record_review_stored(success=False)
        logger.error("Failed to store review", error=str(e), error_code=e.code)
        return None
    record_review_stored(success=True)
    return review_id


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_by_alias=True,
    summary="Analyze review sentiment",
    description="Analyze the sentiment of a movie review and store the result.",
)
async def analyze_review(
    payload: AnalyzeRequest,
    analysis_service: IAnalysisService = Depends(get_analysis_service),
    review_store: IReviewStore = Depends(get_review_store),
) -> AnalyzeResponse:
    """Analyzes the sentiment of a movie review.

    The primary provider is tried first; any failure there silently falls
    back to the rule-based scorer, so this endpoint only fails for invalid
    input.

    Args:
        payload: The request body containing the review text.
        analysis_service: The analysis service, injected as a dependency.
        review_store: The review store, injected as a dependency.

    Returns:
        An `AnalyzeResponse` with the result and the id of the stored review.

    Raises:
        TextValidationError: If the text is empty or longer than allowed.
    """
    logger = get_contextual_logger(__name__, endpoint="analyze", text_length=len(payload.text))

    result = await analysis_service.analyze(payload.text)
    review_id = await _store_review(review_store, payload.text, result, logger)

    logger.info(
        "Review analyzed",
        sentiment=result.sentiment,
        confidence=result.confidence,
        provider=result.provider,
        review_id=review_id,
    )
    return AnalyzeResponse(data=result, review_id=review_id)
