"""
Error codes returned by the sentiment service.

Each code is a stable, machine-readable identifier with a default message.
Codes are grouped by the thousands digit so a client can tell the failing
area at a glance:

    E1xxx  request input
    E2xxx  sentiment providers
    E4xxx  service and system
    E5xxx  configuration
    E6xxx  review storage
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException


class ErrorCode(str, Enum):
    INVALID_INPUT_TEXT = "E1001"
    TEXT_TOO_LONG = "E1002"
    TEXT_EMPTY = "E1003"

    PROVIDER_FAILED = "E2001"
    PROVIDER_NOT_CONFIGURED = "E2002"
    PROVIDER_REQUEST_FAILED = "E2003"
    PROVIDER_MALFORMED_RESPONSE = "E2004"
    UNSUPPORTED_PROVIDER = "E2005"

    INTERNAL_SERVER_ERROR = "E4001"
    SERVICE_UNAVAILABLE = "E4002"
    METRICS_DISABLED = "E4003"

    SECURITY_CONFIG_ERROR = "E5001"
    PROVIDER_CONFIG_ERROR = "E5002"
    SETTINGS_VALIDATION_ERROR = "E5003"

    STORAGE_FAILED = "E6001"
    REVIEW_NOT_FOUND = "E6002"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.INVALID_INPUT_TEXT: "The review text is missing or malformed.",
    ErrorCode.TEXT_TOO_LONG: "The review text exceeds the maximum allowed length.",
    ErrorCode.TEXT_EMPTY: "The review text cannot be empty or whitespace only.",
    ErrorCode.PROVIDER_FAILED: "The sentiment provider failed to analyze the text.",
    ErrorCode.PROVIDER_NOT_CONFIGURED: "The sentiment provider has no API key configured.",
    ErrorCode.PROVIDER_REQUEST_FAILED: "The request to the sentiment provider failed or timed out.",
    ErrorCode.PROVIDER_MALFORMED_RESPONSE: "The sentiment provider returned an unusable answer.",
    ErrorCode.UNSUPPORTED_PROVIDER: "The requested sentiment provider does not exist.",
    ErrorCode.INTERNAL_SERVER_ERROR: "An unexpected internal server error occurred.",
    ErrorCode.SERVICE_UNAVAILABLE: "The service is starting up or shutting down. Please retry.",
    ErrorCode.METRICS_DISABLED: "Metrics collection is disabled.",
    ErrorCode.SECURITY_CONFIG_ERROR: "The CORS configuration is invalid.",
    ErrorCode.PROVIDER_CONFIG_ERROR: "The sentiment provider configuration is invalid.",
    ErrorCode.SETTINGS_VALIDATION_ERROR: "The application settings are inconsistent.",
    ErrorCode.STORAGE_FAILED: "Stored reviews could not be read or written.",
    ErrorCode.REVIEW_NOT_FOUND: "The requested review was not found.",
}


def error_detail(
    error_code: ErrorCode,
    detail: Optional[str] = None,
    status_code: int = 400,
    **context: Any,
) -> Dict[str, Any]:
    """Builds the `detail` payload of an HTTP error.

    Args:
        error_code: The code identifying the failure.
        detail: A request-specific explanation, omitted when empty.
        status_code: The HTTP status code of the response.
        **context: Extra fields reported under `context`.

    Returns:
        A JSON-serializable dictionary.
    """
    payload: Dict[str, Any] = {
        "error_code": error_code.value,
        "error_message": error_code.message,
        "status_code": status_code,
    }
    if detail:
        payload["detail"] = detail
    if context:
        payload["context"] = context
    return payload


def raise_http_error(
    error_code: ErrorCode,
    detail: Optional[str] = None,
    status_code: int = 400,
    **context: Any,
) -> None:
    """Raises an `HTTPException` carrying an `error_detail` payload."""
    raise HTTPException(
        status_code=status_code,
        detail=error_detail(error_code, detail, status_code, **context),
    )
