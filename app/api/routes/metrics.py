"""
Metrics endpoint.
"""

from fastapi import APIRouter, Depends, Response

from app.core.config import Settings
from app.core.dependencies import get_app_settings
from app.monitoring.prometheus import get_metrics
from app.utils.error_codes import ErrorCode, raise_http_error

router = APIRouter()


@router.get(
    "/metrics",
    summary="Prometheus metrics",
    description="Get metrics in Prometheus format for monitoring and alerting.",
    include_in_schema=False,
)
async def get_prometheus_metrics(settings: Settings = Depends(get_app_settings)) -> Response:
    """Exposes application metrics in the Prometheus text format.

    Raises:
        HTTPException: With status code 404 if metrics are disabled.
    """
    if not settings.monitoring.enable_metrics:
        raise_http_error(
            ErrorCode.METRICS_DISABLED,
            detail="Metrics endpoint is disabled",
            status_code=404,
        )

    metrics = get_metrics()
    return Response(content=metrics.get_metrics(), media_type=metrics.get_metrics_content_type())
