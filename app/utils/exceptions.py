"""
Custom exception hierarchy for the movie review sentiment service.

This module defines a set of domain-specific exceptions that are used
throughout the application for consistent and structured error handling. These
exceptions map directly to HTTP error responses, allowing for clear and
predictable error feedback to API clients.
"""

from typing import Any, List, Optional

from app.utils.error_codes import ErrorCode


class ServiceError(Exception):
    """The base exception class for all custom exceptions in this service.

    This class provides a common structure for all application-specific
    exceptions, including a default HTTP status code, a machine-readable
    error code, and an optional context dictionary for additional details.

    Attributes:
        status_code: The default HTTP status code for this type of error.
        code: A string-based error code for programmatic identification.
        context: Optional additional information about the error.
    """

    status_code: int = 500

    def __init__(self, message: str, code: str = "E0000", context: Optional[Any] = None):
        """Initializes the ServiceError.

        Args:
            message: A human-readable message describing the error.
            code: A unique, machine-readable code for the error.
            context: An optional dictionary for providing extra context.
        """
        super().__init__(message)
        self.code = code
        self.context = context


class ValidationError(ServiceError):
    """Raised when input data fails validation checks.

    It corresponds to a 400 Bad Request HTTP status.
    """

    status_code = 400


class NotFoundError(ServiceError):
    """Raised when a requested resource, such as a stored review, does not exist."""

    status_code = 404


class InternalError(ServiceError):
    """Raised for general, unexpected internal server errors."""

    status_code = 500


class ServiceUnavailableError(ServiceError):
    """Raised when the service or one of its dependencies is unavailable."""

    status_code = 503


# --- Input validation exceptions ---


class TextValidationError(ValidationError):
    """A base class for errors related to text input validation."""

    def __init__(
        self, message: str, text_length: Optional[int] = None, context: Optional[Any] = None
    ):
        """Initializes the TextValidationError.

        Args:
            message: A human-readable message describing the validation error.
            text_length: The length of the text that caused the error.
            context: Optional additional context about the error.
        """
        super().__init__(message, code=ErrorCode.INVALID_INPUT_TEXT.value, context=context)
        self.text_length = text_length


class TextTooLongError(TextValidationError):
    """Raised when the input text exceeds the maximum allowed length."""

    def __init__(self, text_length: int, max_length: int, context: Optional[Any] = None):
        message = f"Text length of {text_length} characters exceeds the maximum of {max_length}."
        super().__init__(message, text_length=text_length, context=context)
        self.code = ErrorCode.TEXT_TOO_LONG.value
        self.max_length = max_length


class TextEmptyError(TextValidationError):
    """Raised when the input text is empty or contains only whitespace."""

    def __init__(self, context: Optional[Any] = None):
        message = "The text field is required and cannot be empty or contain only whitespace."
        super().__init__(message, text_length=0, context=context)
        self.code = ErrorCode.TEXT_EMPTY.value


# --- Sentiment provider exceptions ---


class ProviderError(ServiceError):
    """A base class for failures of an external sentiment provider.

    These errors are recovered at the analysis service boundary by falling
    back to the rule-based scorer; they only reach the API if a provider is
    used directly.

    Attributes:
        provider: The name of the provider that failed.
    """

    status_code = 502

    def __init__(
        self,
        message: str,
        provider: str,
        code: str = ErrorCode.PROVIDER_FAILED.value,
        context: Optional[Any] = None,
    ):
        super().__init__(message, code=code, context=context)
        self.provider = provider


class ProviderNotConfiguredError(ProviderError):
    """Raised when a provider is used without its credentials."""

    status_code = 503

    def __init__(self, provider: str, context: Optional[Any] = None):
        message = f"Sentiment provider '{provider}' is not configured (missing API key)."
        super().__init__(message, provider=provider, code=ErrorCode.PROVIDER_NOT_CONFIGURED.value, context=context)


class ProviderRequestError(ProviderError):
    """Raised when the request to a provider fails at the HTTP or transport level."""

    def __init__(self, message: str, provider: str, context: Optional[Any] = None):
        super().__init__(message, provider=provider, code=ErrorCode.PROVIDER_REQUEST_FAILED.value, context=context)


class ProviderResponseError(ProviderError):
    """Raised when a provider answers with a malformed or unusable payload."""

    def __init__(self, message: str, provider: str, context: Optional[Any] = None):
        super().__init__(message, provider=provider, code=ErrorCode.PROVIDER_MALFORMED_RESPONSE.value, context=context)


class UnsupportedProviderError(ValidationError):
    """Raised when an unknown provider name is requested."""

    def __init__(
        self, provider: str, supported_providers: List[str], context: Optional[Any] = None
    ):
        message = (
            f"Sentiment provider '{provider}' is not supported. "
            f"Supported providers are: {', '.join(supported_providers)}"
        )
        super().__init__(message, code=ErrorCode.UNSUPPORTED_PROVIDER.value, context=context)
        self.provider = provider


# --- Storage exceptions ---


class StorageError(ServiceError):
    """Raised when the review store cannot read or write data."""

    status_code = 500

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, code=ErrorCode.STORAGE_FAILED.value, context=context)


class ReviewNotFoundError(NotFoundError):
    """Raised when a stored review with the requested id does not exist."""

    def __init__(self, review_id: int, context: Optional[Any] = None):
        super().__init__(f"Review {review_id} was not found.", code=ErrorCode.REVIEW_NOT_FOUND.value, context=context)
        self.review_id = review_id


# --- Configuration exceptions ---


class ConfigurationError(ValidationError, ValueError):
    """Base class for all configuration-related errors.

    It also derives from `ValueError` so that pydantic reports it as a regular
    settings validation failure when raised from a validator.
    """

    status_code = 500


class SecurityConfigError(ConfigurationError):
    """Raised when security configuration is invalid or missing."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, code=ErrorCode.SECURITY_CONFIG_ERROR.value, context=context)


class ProviderConfigError(ConfigurationError):
    """Raised when the sentiment provider configuration is invalid."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, code=ErrorCode.PROVIDER_CONFIG_ERROR.value, context=context)


class SettingsValidationError(ConfigurationError):
    """Raised when application settings validation fails."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, code=ErrorCode.SETTINGS_VALIDATION_ERROR.value, context=context)
