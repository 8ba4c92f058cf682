"""
Errors raised by errdetails itself.

These are programmer errors, not runtime conditions: they surface at the
call that introduces the misuse (building a chain with a bad key,
constructing a factory without a store factory) rather than at some later
lookup or render. Every other operation of the package is total: a missed
lookup is ``(None, False)``, a detail without display text is simply left
out of ``detailed()``.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                    ErrdetailsError                        │
        │              (category, context, to_dict)                 │
        ├──────────────────────────────────────────────────────────┤
        │                                                           │
        │  InvalidKeyKindError          MisconfiguredFactoryError   │
        │  (KEY, also TypeError)        (CONFIG, also ValueError)   │
        │                                                           │
        └──────────────────────────────────────────────────────────┘

Guardrails:
    ❌ DON'T: Catch InvalidKeyKindError to retry with another key
    ✅ DO: Use hashable keys (str, Key, Label, enums, frozen dataclasses)

    ❌ DON'T: Treat ``found is False`` as an error
    ✅ DO: Branch on the found flag returned by ``lookup()``

Tags:
    error-handling, exception-hierarchy, fail-fast, errdetails

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Classification of errdetails' own errors."""

    KEY = "KEY"          # Detail key cannot be compared
    CONFIG = "CONFIG"    # Factory cannot be built


class ErrdetailsError(Exception):
    """
    Base exception for errors raised by errdetails.

    Subclasses set ``default_category``. ``context`` holds whatever the
    raising site knows about the misuse (offending key type, argument name)
    and is included in ``to_dict()`` for structured logging.
    """

    default_category: ErrorCategory = ErrorCategory.CONFIG

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class InvalidKeyKindError(ErrdetailsError, TypeError):
    """A detail key's type does not support equality comparison (unhashable)."""

    default_category = ErrorCategory.KEY

    def __init__(self, key: Any, message: str | None = None):
        self.key = key
        key_type = type(key).__qualname__
        super().__init__(
            message or f"Detail key of type {key_type!r} is not comparable: {key!r}",
            context={"key_type": key_type},
        )


class MisconfiguredFactoryError(ErrdetailsError, ValueError):
    """ErrorFactory constructed without a usable store factory."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, store_factory: Any, message: str | None = None):
        self.store_factory = store_factory
        super().__init__(
            message or "Won't instantiate ErrorFactory without a callable store factory.",
            context={"store_factory": repr(store_factory)},
        )


__all__ = [
    "ErrorCategory",
    "ErrdetailsError",
    "InvalidKeyKindError",
    "MisconfiguredFactoryError",
]
