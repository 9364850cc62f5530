"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends

from app.api.schemas.responses import HealthResponse
from app.core.config import Settings
from app.core.dependencies import get_analysis_service, get_app_settings
from app.interfaces import IAnalysisService
from app.models.base import utc_timestamp

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Check the health of the service and whether AI analysis is enabled.",
)
async def health_check(
    analysis_service: IAnalysisService = Depends(get_analysis_service),
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """Reports service health and the active provider.

    `ai_enabled` is false when the primary provider has no credentials; the
    service is still healthy in that case because the rule-based scorer
    answers every request.
    """
    info = analysis_service.get_service_info()
    return HealthResponse(
        status="healthy",
        service=settings.server.app_name,
        version=settings.server.app_version,
        provider=info["primary"]["provider"],
        ai_enabled=info["ai_enabled"],
        timestamp=utc_timestamp(),
    )
