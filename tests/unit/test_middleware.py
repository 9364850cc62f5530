"""Tests for the metrics and request logging middleware."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from app.api.middleware import MetricsMiddleware, RequestLoggingMiddleware


def request_count(endpoint: str, status_code: str) -> float:
    value = REGISTRY.get_sample_value(
        "sentiment_requests_total",
        {"endpoint": endpoint, "method": "GET", "status_code": status_code},
    )
    return value or 0.0


@pytest.fixture
def metrics_app():
    app = FastAPI()
    app.add_middleware(MetricsMiddleware)

    @app.get("/items/{item_id}")
    async def get_item(item_id: int):
        return {"id": item_id}

    @app.get("/metrics")
    async def metrics():
        return {}

    return app


@pytest.mark.unit
class TestMetricsMiddleware:
    """Tests for request metrics labelling."""

    def test_uses_route_template_as_endpoint(self, metrics_app):
        before = request_count("/items/{item_id}", "200")

        client = TestClient(metrics_app)
        client.get("/items/1")
        client.get("/items/2")

        assert request_count("/items/{item_id}", "200") == before + 2

    def test_unmatched_paths_share_one_label(self, metrics_app):
        before = request_count("unmatched", "404")

        TestClient(metrics_app).get("/does/not/exist")

        assert request_count("unmatched", "404") == before + 1

    def test_metrics_endpoint_not_counted(self, metrics_app):
        before = request_count("/metrics", "200")

        TestClient(metrics_app).get("/metrics")

        assert request_count("/metrics", "200") == before


@pytest.mark.unit
class TestRequestLoggingMiddleware:
    """Tests for the log level chosen per request."""

    @pytest.fixture
    def logging_app(self):
        app = FastAPI()
        app.add_middleware(RequestLoggingMiddleware)

        @app.get("/api/health")
        async def health():
            return {"status": "healthy"}

        @app.get("/missing")
        async def missing():
            from fastapi import HTTPException

            raise HTTPException(status_code=404)

        return app

    def test_health_probe_logged_at_debug(self, logging_app):
        with patch("app.api.middleware.logging.logger") as logger:
            TestClient(logging_app).get("/api/health")

        logger.debug.assert_called_once()
        logger.info.assert_not_called()

    def test_client_error_logged_as_warning(self, logging_app):
        with patch("app.api.middleware.logging.logger") as logger:
            TestClient(logging_app).get("/missing")

        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["http_status"] == 404
