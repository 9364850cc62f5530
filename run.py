#!/usr/bin/env python3
"""A development server launcher for the movie review sentiment service.

Usage:
    python run.py

This script starts the application in a local development environment. It
sets development defaults for the environment variables and runs uvicorn with
hot reloading. Without `GEMINI_API_KEY` every review is analyzed by the
rule-based scorer.
"""

import os
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def print_startup_info(settings):
    """Prints a banner with useful development information."""
    host_display = "localhost" if settings.server.host == "0.0.0.0" else settings.server.host
    base_url = f"http://{host_display}:{settings.server.port}"
    prefix = settings.server.api_prefix
    ai_status = "Gemini" if settings.provider.gemini_enabled else "disabled (rule-based only)"

    print("Movie Review Sentiment Service")
    print("=" * 50)
    print(f"Project Directory: {project_root}")
    print(f"Mode: {'Debug' if settings.debug else 'Production'}")
    print(f"Log Level: {settings.log_level}")
    print(f"AI Analysis: {ai_status}")
    print(f"Database: {settings.storage.database_path}")
    print()
    print("Available Endpoints:")
    print(f"  Health Check: {base_url}{prefix}/health")
    print(f"  Analyze:      {base_url}{prefix}/analyze")
    print(f"  Reviews:      {base_url}{prefix}/reviews")
    print(f"  Stats:        {base_url}{prefix}/stats")
    print(f"  Metrics:      {base_url}/metrics")
    if settings.debug:
        print(f"  API Docs:     {base_url}/docs")
    print("=" * 50)


if __name__ == "__main__":
    os.environ.setdefault("SENTIMENT_DEBUG", "true")
    os.environ.setdefault("SENTIMENT_LOG_LEVEL", "INFO")
    os.environ.setdefault("SENTIMENT_ENABLE_METRICS", "true")

    try:
        import uvicorn

        from app.core.config import get_settings

        settings = get_settings()
        print_startup_info(settings)

        uvicorn.run(
            "app.main:app",
            host=settings.server.host,
            port=settings.server.port,
            log_level=settings.log_level.lower(),
            reload=settings.debug,
            reload_dirs=[str(project_root / "app")],
        )

    except KeyboardInterrupt:
        print("\nServer stopped by user")
    except ImportError as e:
        print(f"Import Error: {e}")
        print("Make sure you've installed dependencies: pip install -e .")
        sys.exit(1)
