"""
API middleware components.
"""

from app.api.middleware.correlation import CorrelationIdMiddleware
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.middleware.metrics import MetricsMiddleware, route_template

__all__ = [
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
    "MetricsMiddleware",
    "route_template",
]
