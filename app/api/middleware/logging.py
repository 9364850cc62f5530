"""
Request logging middleware.

Logs the completion (or failure) of every request with its duration and
status. Probe traffic on the health and metrics endpoints is logged at debug
level so it does not drown the access log.
"""

import time
from typing import Callable, Iterable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger

logger = get_logger(__name__)

QUIET_PATHS = ("/metrics", "/api/health")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one structured record per HTTP request.

    Attributes:
        quiet_paths: Paths whose successful requests are logged at debug level.
    """

    def __init__(self, app, quiet_paths: Iterable[str] = QUIET_PATHS):
        super().__init__(app)
        self.quiet_paths = frozenset(quiet_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                http_method=request.method,
                http_path=request.url.path,
                duration_ms=round((time.time() - start_time) * 1000, 2),
                error=str(e),
                error_type=type(e).__name__,
                request_type="http_request",
                exc_info=True,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        if request.url.path in self.quiet_paths and response.status_code < 400:
            log = logger.debug
        elif response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info

        log(
            "Request completed",
            http_method=request.method,
            http_path=request.url.path,
            http_query=str(request.query_params) if request.query_params else None,
            http_status=response.status_code,
            duration_ms=round(duration_ms, 2),
            client_ip=request.client.host if request.client else None,
            request_type="http_request",
        )
        return response
