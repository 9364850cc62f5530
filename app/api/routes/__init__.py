"""
API route handlers.
"""

from fastapi import APIRouter

from app.api.routes import analysis, health, metrics, reviews

# Routes mounted under the API prefix (/api)
router = APIRouter()
router.include_router(health.router, tags=["Health"])
router.include_router(analysis.router, tags=["Analysis"])
router.include_router(reviews.router, tags=["Reviews"])

# Routes mounted at the application root
metrics_router = metrics.router

__all__ = ["router", "metrics_router"]
