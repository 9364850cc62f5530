"""
Application entrypoint for the movie review sentiment service.

`create_app` is the application factory: it wires the middleware stack,
registers the exception handlers that turn errors into the service's JSON
error envelope, and mounts the API routers. Long-lived services are built by
the lifespan handler in `app.core.events`.
"""

import time
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from app.api import metrics_router, router
from app.api.middleware import (
    CorrelationIdMiddleware,
    MetricsMiddleware,
    RequestLoggingMiddleware,
)
from app.core.config import Settings, get_settings
from app.core.events import lifespan
from app.core.logging import get_correlation_id, get_logger, setup_structured_logging
from app.models.base import utc_timestamp
from app.utils.error_codes import ErrorCode
from app.utils.exceptions import ServiceError

setup_structured_logging()
logger = get_logger(__name__)


def _error_response(
    request: Request,
    status_code: int,
    error_code: str,
    error_message: str,
    **fields: Any,
) -> ORJSONResponse:
    """Builds the JSON error envelope shared by every handler."""
    content: Dict[str, Any] = {
        "success": False,
        "error_code": error_code,
        "error_message": error_message,
        "status_code": status_code,
        **fields,
        "correlation_id": getattr(request.state, "correlation_id", None) or get_correlation_id(),
        "timestamp": utc_timestamp(),
    }
    return ORJSONResponse(status_code=status_code, content=content)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    """Returns 422 with every invalid request field listed."""
    validation_errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning(
        "Request validation failed", path=request.url.path, errors=validation_errors
    )
    return _error_response(
        request,
        422,
        ErrorCode.INVALID_INPUT_TEXT.value,
        "Request validation failed",
        detail="The request data failed validation. Please check the errors below.",
        validation_errors=validation_errors,
    )


async def handle_service_error(request: Request, exc: ServiceError) -> ORJSONResponse:
    logger.warning(
        "Service error",
        error=str(exc),
        error_code=exc.code,
        status_code=exc.status_code,
        path=request.url.path,
    )
    extra = {"context": exc.context} if exc.context else {}
    return _error_response(request, exc.status_code, exc.code, str(exc), **extra)


async def handle_unexpected_error(request: Request, exc: Exception) -> ORJSONResponse:
    """Returns 500 with an error id that can be matched against the logs."""
    error_id = f"error_{int(time.time())}_{id(exc)}"
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_id=error_id,
        path=request.url.path,
        exc_info=True,
    )
    return _error_response(
        request,
        500,
        ErrorCode.INTERNAL_SERVER_ERROR.value,
        "An unexpected internal server error occurred",
        error_id=error_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ServiceError, handle_service_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Creates and configures a FastAPI application instance.

    Middleware is added innermost first, so at request time the correlation
    ID is assigned before anything is logged.

    Args:
        settings: Optional settings for this application. Defaults to the
            process-wide settings.

    Returns:
        The configured FastAPI application instance.
    """
    settings = settings or get_settings()
    docs_enabled = settings.server.debug

    app = FastAPI(
        title=settings.server.app_name,
        description="Sentiment analysis for movie reviews with an AI provider and a rule-based fallback.",
        version=settings.server.app_version,
        debug=settings.server.debug,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        default_response_class=ORJSONResponse,
    )
    app.state.settings = settings

    if settings.monitoring.enable_metrics:
        app.add_middleware(MetricsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    register_exception_handlers(app)

    app.include_router(router, prefix=settings.server.api_prefix)
    app.include_router(metrics_router, tags=["Monitoring"])

    @app.get("/", tags=["root"])
    async def root() -> dict:
        return {
            "service": settings.server.app_name,
            "version": settings.server.app_version,
            "status": "operational",
            "docs_url": "/docs" if docs_enabled else "disabled",
            "health_url": f"{settings.server.api_prefix}/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.debug,
        log_level=settings.monitoring.log_level.lower(),
        workers=1 if settings.server.debug else settings.server.workers,
    )
