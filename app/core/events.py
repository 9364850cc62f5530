"""
Application lifecycle event handlers for the movie review sentiment service.

This module defines the startup and shutdown logic for the application: the
review store is opened, the primary and fallback sentiment providers are
built, and the analysis service is assembled on startup. On shutdown the
providers release their HTTP clients and the store is closed.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)

FALLBACK_PROVIDER = "rule_based"


async def _startup_services(app: FastAPI, settings: Settings) -> None:
    from app.models.factory import ProviderFactory
    from app.services.analysis import AnalysisService
    from app.services.review_store import ReviewStore

    review_store = ReviewStore(settings.storage.database_path)
    review_store.init()
    app.state.review_store = review_store

    primary = ProviderFactory.create_provider(settings.provider.provider, settings=settings)
    fallback = ProviderFactory.create_provider(FALLBACK_PROVIDER, settings=settings)
    app.state.analysis_service = AnalysisService(primary, fallback, settings)

    if not primary.is_available():
        logger.warning(
            "Primary sentiment provider is not configured, rule-based analysis will be used",
            provider=primary.name,
        )

    logger.info(
        "Services initialized",
        primary_provider=primary.name,
        ai_enabled=primary.is_available() and primary.name != fallback.name,
        database_path=settings.storage.database_path,
    )


async def _shutdown_services(app: FastAPI, reason: str) -> None:
    """Release providers and the review store; safe to call more than once."""
    logger.info("Application shutdown initiated", reason=reason)

    analysis_service = getattr(app.state, "analysis_service", None)
    if analysis_service is not None:
        try:
            await analysis_service.aclose()
            logger.info("Sentiment providers closed")
        except Exception as e:
            logger.error("Error closing sentiment providers", error=str(e), exc_info=True)
        app.state.analysis_service = None

    review_store = getattr(app.state, "review_store", None)
    if review_store is not None:
        try:
            review_store.close()
        except Exception as e:
            logger.error("Error closing review store", error=str(e), exc_info=True)
        app.state.review_store = None

    logger.info("Application shutdown complete", reason=reason)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manages the application's startup and shutdown events.

    The code before the `yield` statement is executed on startup, and the code
    after is executed on shutdown. The settings come from `app.state.settings`
    when the application was created with explicit settings.

    Args:
        app: The FastAPI application instance, used to store state
            (e.g., `app.state.review_store = store`).

    Yields:
        Control back to the application, which runs until it is terminated.
    """
    settings = getattr(app.state, "settings", None) or get_settings()

    logger.info(
        "Starting application",
        app_name=settings.server.app_name,
        version=settings.server.app_version,
        debug=settings.server.debug,
    )

    await _startup_services(app, settings)
    logger.info("Application startup complete")

    try:
        yield
    finally:
        await _shutdown_services(app, reason="lifespan_exit")
