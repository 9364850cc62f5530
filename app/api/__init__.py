"""
API layer for the movie review sentiment service.

This module contains all API-related components including routes,
middleware, and request/response schemas.
"""

from app.api.routes import metrics_router, router

__all__ = ["router", "metrics_router"]
