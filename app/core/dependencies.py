"""
Dependency injection for the movie review sentiment service.

This module provides the FastAPI dependency functions that hand the API layer
its services. The services themselves are created once by the application
lifespan and kept on `app.state`; the functions here only look them up and
return them as interface types, so tests can swap in fakes.
"""

from typing import Any, Optional, TypeVar

from fastapi import Request

from app.core.config import Settings, get_settings
from app.interfaces import IAnalysisService, IReviewStore
from app.utils.error_codes import ErrorCode, raise_http_error

T = TypeVar("T")


def get_analysis_service(request: Request) -> IAnalysisService:
    """Provides the analysis service created at startup.

    Raises:
        HTTPException: With status code 503 if the service is not initialized.
    """
    return require_service(
        getattr(request.app.state, "analysis_service", None),
        ErrorCode.SERVICE_UNAVAILABLE,
        detail="Analysis service is not initialized",
        service_name="analysis",
    )


def get_review_store(request: Request) -> IReviewStore:
    """Provides the review store opened at startup.

    Raises:
        HTTPException: With status code 503 if the store is not initialized.
    """
    return require_service(
        getattr(request.app.state, "review_store", None),
        ErrorCode.SERVICE_UNAVAILABLE,
        detail="Review store is not initialized",
        service_name="review_store",
    )


def require_service(
    service: Optional[T],
    error_code: ErrorCode,
    detail: Optional[str] = None,
    **additional_context: Any,
) -> T:
    """Validates that a required service is available, raising a standardized error if not.

    Args:
        service: The service instance to check.
        error_code: The ErrorCode to use if the service is not available.
        detail: Optional detailed error message. If not provided, uses the
            default message for the error_code.
        **additional_context: Additional context to include in the error response.

    Returns:
        The service instance if it is available (not None).

    Raises:
        HTTPException: With status code 503 if the service is not available.
    """
    if service is None:
        raise_http_error(
            error_code=error_code,
            detail=detail,
            status_code=503,
            **additional_context,
        )
    return service


def get_app_settings(request: Request) -> Settings:
    """Provides the settings the application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()
