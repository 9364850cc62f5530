"""
Correlation ID middleware for request tracing.

Every request gets a correlation ID, taken from the `X-Correlation-ID` (or
`X-Request-ID`) header when the client sends one. The ID is bound to the
logging context for the lifetime of the request and echoed back in the
response headers.
"""

import re
from typing import Callable, Optional, Sequence

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import (
    clear_correlation_id,
    generate_correlation_id,
    get_logger,
    set_correlation_id,
)

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
FALLBACK_HEADERS = ("X-Request-ID",)
MAX_CORRELATION_ID_LENGTH = 128

_SAFE_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:\-]+$")


def _clean_correlation_id(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    value = value.strip()
    if len(value) > MAX_CORRELATION_ID_LENGTH or not _SAFE_ID_PATTERN.match(value):
        return None
    return value


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Manages correlation IDs for request tracking.

    Client-supplied IDs are only accepted when they are short and consist of
    safe characters; otherwise a fresh UUID is generated.

    Attributes:
        header_name: The header the correlation ID is read from and written to.
        fallback_headers: Other request headers accepted as the ID source.
    """

    def __init__(
        self,
        app,
        header_name: str = CORRELATION_HEADER,
        fallback_headers: Sequence[str] = FALLBACK_HEADERS,
    ):
        super().__init__(app)
        self.header_name = header_name
        self.fallback_headers = tuple(fallback_headers)

    def _extract(self, request: Request) -> Optional[str]:
        for header in (self.header_name, *self.fallback_headers):
            correlation_id = _clean_correlation_id(request.headers.get(header))
            if correlation_id:
                return correlation_id
        return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = self._extract(request)
        if correlation_id is None:
            correlation_id = generate_correlation_id()

        set_correlation_id(correlation_id)
        request.state.correlation_id = correlation_id
        try:
            response = await call_next(request)
            response.headers[self.header_name] = correlation_id
            return response
        except Exception as e:
            logger.error(
                "Request processing failed",
                path=request.url.path,
                method=request.method,
                error=str(e),
                exc_info=True,
            )
            raise
        finally:
            clear_correlation_id()
