"""
Metrics collection middleware.

Records request counts, latencies and in-flight requests in Prometheus. The
endpoint label is the matched route template (`/api/reviews/{review_id}`),
not the raw path, so review ids do not create new time series.
"""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from app.monitoring.prometheus import get_metrics

UNMATCHED_ROUTE = "unmatched"


def route_template(request: Request) -> str:
    """Returns the path template of the route that matches `request`."""
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", request.url.path)
    return UNMATCHED_ROUTE


class MetricsMiddleware(BaseHTTPMiddleware):
    """Collects Prometheus metrics for HTTP requests.

    The `/metrics` endpoint itself is not measured.

    Attributes:
        metrics: The `PrometheusMetrics` instance used to record metrics.
    """

    def __init__(self, app):
        super().__init__(app)
        self.metrics = get_metrics()

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path == "/metrics":
            return await call_next(request)

        endpoint = route_template(request)
        start_time = time.time()
        status_code = 500
        self.metrics.increment_active_requests()

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            self.metrics.record_request(endpoint=endpoint, method=request.method, status_code=status_code)
            self.metrics.record_request_duration(
                endpoint=endpoint, method=request.method, duration=time.time() - start_time
            )
            self.metrics.decrement_active_requests()
