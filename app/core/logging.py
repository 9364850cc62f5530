"""
Structured logging configuration for the sentiment analysis service.

All log entries are produced by `structlog` on top of the standard library
`logging` module. Every entry is enriched with the service name, version,
emitting component and the correlation ID of the current request, and
credential-like fields are masked before rendering.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

import structlog

from app.core.config import Settings, get_settings

# Context variable to hold the correlation ID for the current request context.
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

REDACTED = "***"
SENSITIVE_KEYS = frozenset({"api_key", "gemini_api_key", "x-goog-api-key", "authorization"})

# Third-party loggers that are too chatty at INFO.
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_structured_logging(settings: Optional[Settings] = None) -> None:
    """Configures structured logging for the application.

    Entries are rendered as JSON by default. With
    `SENTIMENT_LOG_FORMAT=console` they are rendered for humans instead.

    Args:
        settings: Optional settings; defaults to the process-wide settings.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.monitoring.log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if settings.monitoring.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _add_request_context,
            _redact_sensitive_fields,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_request_context(
    logger: logging.Logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Adds service and request context to a log entry."""
    settings = get_settings()
    event_dict.setdefault("service", settings.monitoring.service_name)
    event_dict.setdefault("version", settings.server.app_version)
    event_dict.setdefault("component", getattr(logger, "name", "unknown"))

    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id

    if method_name in ("error", "exception", "critical"):
        event_dict.setdefault("error_type", "application_error")
        if "exc_info" in event_dict and method_name == "exception":
            event_dict["error_type"] = "exception"

    return event_dict


def _redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Masks the values of credential fields, including one level of nesting."""
    for key, value in event_dict.items():
        if key.lower() in SENSITIVE_KEYS and value:
            event_dict[key] = REDACTED
        elif isinstance(value, dict):
            event_dict[key] = {
                k: REDACTED if str(k).lower() in SENSITIVE_KEYS and v else v
                for k, v in value.items()
            }
    return event_dict


def log_provider_operation(
    logger,
    operation: str,
    provider: str,
    duration_ms: Optional[float] = None,
    success: bool = True,
    error: Optional[str] = None,
    **extra: Any,
) -> None:
    """Logs a standardized message for a sentiment provider operation.

    Failures are logged as warnings: the analysis service recovers from them
    by falling back to the rule-based scorer.

    Args:
        logger: The `structlog` logger instance to use.
        operation: The type of operation (e.g., 'analyze').
        provider: The name of the provider involved in the operation.
        duration_ms: The duration of the operation in milliseconds (optional).
        success: Whether the operation was successful.
        error: An error message if the operation failed (optional).
        **extra: Additional fields to include in the log entry.
    """
    log_data = {
        "operation": operation,
        "provider": provider,
        "operation_type": "provider",
        "success": success,
        **extra,
    }

    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)

    if error:
        log_data["error"] = error
        logger.warning("Provider operation failed", **log_data)
    else:
        logger.info("Provider operation completed", **log_data)


def set_correlation_id(correlation_id: str) -> None:
    """Binds `correlation_id` to the current request context."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    return correlation_id_var.get()


def generate_correlation_id() -> str:
    """Generates a new correlation ID (a UUID4 string)."""
    return str(uuid.uuid4())


def clear_correlation_id() -> None:
    correlation_id_var.set(None)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Retrieves a `structlog` logger named after the calling module."""
    return structlog.get_logger(name)


def get_contextual_logger(name: str, **extra_context) -> structlog.stdlib.BoundLogger:
    """Retrieves a logger with additional, permanently bound context.

    The current correlation ID, if any, is bound as well.

    Args:
        name: The name of the logger, typically the module's `__name__`.
        **extra_context: Keyword arguments to be bound to the logger's context.

    Returns:
        A `structlog` logger with the given context bound to it.
    """
    logger = structlog.get_logger(name)

    correlation_id = get_correlation_id()
    if correlation_id:
        extra_context["correlation_id"] = correlation_id

    return logger.bind(**extra_context) if extra_context else logger
