"""Tests for correlation ID handling and structured logging helpers.

This module ensures that correlation IDs are generated, propagated through
the middleware and echoed back to clients, and that the logging helpers bind
the expected context.
"""

import uuid
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.middleware.correlation import CorrelationIdMiddleware
from app.core.logging import (
    REDACTED,
    _add_request_context,
    _redact_sensitive_fields,
    clear_correlation_id,
    generate_correlation_id,
    get_correlation_id,
    log_provider_operation,
    set_correlation_id,
)


@pytest.fixture
def echo_app():
    """A minimal app that returns the correlation ID seen by the handler."""
    app = FastAPI()
    app.add_middleware(CorrelationIdMiddleware)

    @app.get("/echo")
    async def echo():
        return {"correlation_id": get_correlation_id()}

    return app


@pytest.mark.unit
class TestCorrelationIdManagement:
    """Tests for setting, getting, generating and clearing correlation IDs."""

    def test_set_get_and_clear(self):
        set_correlation_id("test-correlation-id-123")
        assert get_correlation_id() == "test-correlation-id-123"

        clear_correlation_id()
        assert get_correlation_id() is None

    def test_generate_correlation_id(self):
        id1 = generate_correlation_id()
        id2 = generate_correlation_id()

        assert uuid.UUID(id1)
        assert id1 != id2


@pytest.mark.unit
class TestCorrelationIdMiddleware:
    """Tests for the middleware that assigns correlation IDs."""

    def test_generates_id_when_missing(self, echo_app):
        response = TestClient(echo_app).get("/echo")

        header = response.headers["X-Correlation-ID"]
        assert uuid.UUID(header)
        assert response.json()["correlation_id"] == header

    def test_uses_client_id(self, echo_app):
        response = TestClient(echo_app).get("/echo", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"
        assert response.json()["correlation_id"] == "abc-123"

    def test_accepts_request_id_header(self, echo_app):
        response = TestClient(echo_app).get("/echo", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Correlation-ID"] == "req-42"

    @pytest.mark.parametrize("bad_id", ["has spaces", "x" * 200, "<script>"])
    def test_unsafe_client_id_replaced(self, echo_app, bad_id):
        response = TestClient(echo_app).get("/echo", headers={"X-Correlation-ID": bad_id})

        assert response.headers["X-Correlation-ID"] != bad_id
        assert uuid.UUID(response.headers["X-Correlation-ID"])

    def test_id_cleared_after_request(self, echo_app):
        TestClient(echo_app).get("/echo", headers={"X-Correlation-ID": "abc-123"})

        assert get_correlation_id() is None


@pytest.mark.unit
class TestLoggingHelpers:
    """Tests for the structlog processors and helpers."""

    def test_request_context_processor(self):
        set_correlation_id("ctx-1")
        try:
            event = _add_request_context(MagicMock(name="logger"), "info", {"event": "hello"})
        finally:
            clear_correlation_id()

        assert event["correlation_id"] == "ctx-1"
        assert event["service"] == "sentiment-analysis"
        assert "version" in event
        assert "component" in event

    def test_error_events_get_error_type(self):
        event = _add_request_context(MagicMock(), "error", {"event": "boom"})

        assert event["error_type"] == "application_error"
        assert "correlation_id" not in event

    def test_log_provider_operation_success(self):
        logger = MagicMock()

        log_provider_operation(logger, "analyze", "gemini", duration_ms=12.3456)

        logger.info.assert_called_once()
        kwargs = logger.info.call_args.kwargs
        assert kwargs["provider"] == "gemini"
        assert kwargs["duration_ms"] == 12.35
        assert kwargs["success"] is True

    def test_log_provider_operation_failure(self):
        logger = MagicMock()

        log_provider_operation(
            logger, "analyze", "gemini", success=False, error="timeout", reason="request_error"
        )

        logger.warning.assert_called_once()
        kwargs = logger.warning.call_args.kwargs
        assert kwargs["error"] == "timeout"
        assert kwargs["reason"] == "request_error"

    def test_credentials_are_redacted(self):
        event = _redact_sensitive_fields(
            MagicMock(),
            "info",
            {
                "event": "calling provider",
                "api_key": "secret-key",
                "headers": {"x-goog-api-key": "secret-key", "accept": "application/json"},
            },
        )

        assert event["api_key"] == REDACTED
        assert event["headers"]["x-goog-api-key"] == REDACTED
        assert event["headers"]["accept"] == "application/json"

    def test_empty_credentials_left_alone(self):
        event = _redact_sensitive_fields(MagicMock(), "info", {"gemini_api_key": None})

        assert event["gemini_api_key"] is None
