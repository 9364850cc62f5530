"""Tests for the exception hierarchy and error code helpers."""

import pytest
from fastapi import HTTPException

from app.utils.error_codes import ErrorCode, error_detail, raise_http_error
from app.utils.exceptions import (
    ConfigurationError,
    ProviderError,
    ProviderNotConfiguredError,
    ProviderRequestError,
    ReviewNotFoundError,
    ServiceError,
    StorageError,
    TextEmptyError,
    TextTooLongError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    """Tests for status codes and error codes of the custom exceptions."""

    @pytest.mark.parametrize(
        "error, status_code, code",
        [
            (TextEmptyError(), 400, "E1003"),
            (TextTooLongError(20000, 10000), 400, "E1002"),
            (ProviderNotConfiguredError("gemini"), 503, "E2002"),
            (ProviderRequestError("timeout", provider="gemini"), 502, "E2003"),
            (StorageError("disk full"), 500, "E6001"),
            (ReviewNotFoundError(7), 404, "E6002"),
        ],
    )
    def test_status_and_code(self, error, status_code, code):
        assert isinstance(error, ServiceError)
        assert error.status_code == status_code
        assert error.code == code

    def test_provider_errors_carry_provider_name(self):
        error = ProviderNotConfiguredError("gemini")

        assert isinstance(error, ProviderError)
        assert error.provider == "gemini"
        assert "missing API key" in str(error)

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_review_not_found_message(self):
        assert str(ReviewNotFoundError(42)) == "Review 42 was not found."


@pytest.mark.unit
class TestErrorCodes:
    """Tests for the error response helpers."""

    def test_every_code_has_a_message(self):
        for code in ErrorCode:
            assert code.message

    def test_error_detail(self):
        response = error_detail(
            ErrorCode.METRICS_DISABLED, detail="off", status_code=404, feature="metrics"
        )

        assert response == {
            "error_code": "E4003",
            "error_message": "Metrics collection is disabled.",
            "status_code": 404,
            "detail": "off",
            "context": {"feature": "metrics"},
        }

    def test_raise_http_error(self):
        with pytest.raises(HTTPException) as exc_info:
            raise_http_error(ErrorCode.SERVICE_UNAVAILABLE, status_code=503)

        assert exc_info.value.status_code == 503
        assert exc_info.value.detail["error_code"] == "E4002"
