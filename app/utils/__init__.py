"""Utility package with lazy exports to avoid heavy import side effects."""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple

_LAZY_IMPORTS: Dict[str, Tuple[str, str]] = {
    # Exceptions
    "ServiceError": ("app.utils.exceptions", "ServiceError"),
    "ValidationError": ("app.utils.exceptions", "ValidationError"),
    "TextEmptyError": ("app.utils.exceptions", "TextEmptyError"),
    "TextTooLongError": ("app.utils.exceptions", "TextTooLongError"),
    "ProviderError": ("app.utils.exceptions", "ProviderError"),
    "StorageError": ("app.utils.exceptions", "StorageError"),
    # Error codes/helpers
    "ErrorCode": ("app.utils.error_codes", "ErrorCode"),
    "error_detail": ("app.utils.error_codes", "error_detail"),
    "raise_http_error": ("app.utils.error_codes", "raise_http_error"),
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> Any:
    """Import requested attributes on first access."""
    try:
        module_name, attr_name = _LAZY_IMPORTS[name]
    except KeyError as exc:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from exc

    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(__all__)
