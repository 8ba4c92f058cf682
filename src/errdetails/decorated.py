"""
Decorated errors: a message plus typed details.

A ``DecoratedError`` pairs the message a caller would have put in a plain
exception with a detail store. Two representations come out of it and they
never interfere:

- **For code:** ``lookup(key)`` / ``get(key)`` / ``key in err`` drive control
  flow on typed details (retriable? critical? which tenant?).
- **For operators:** ``detailed()`` is the message followed by one line per
  displayable detail, ready for a log line or alert body.

``str(err)`` stays the bare message, so decorated errors drop into code that
only knows about ordinary exceptions.

Errors are created by an ``ErrorFactory`` and keep a reference to it, so
``caused()`` builds the wrapping error with the same store factory and
detalizers. The cause is recorded under ``CAUSED_BY_DETAIL_KEY`` and also as
``__cause__``, which makes the history visible in standard tracebacks.

Examples:
    >>> factory = ErrorFactory()
    >>> low = factory.new("disk full", ("volume", "/data"))
    >>> high = low.caused("snapshot failed", attempt=Label("3"))
    >>> str(high)
    'snapshot failed caused by: disk full'
    >>> high.get(CAUSED_BY_DETAIL_KEY) is low
    True
    >>> print(high.detailed(), end="")
    snapshot failed caused by: disk full
    attempt : 3

Tags:
    decorated-error, error-context, error-chaining, errdetails

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from errdetails.keys import CAUSED_BY_DETAIL_KEY
from errdetails.protocols import DetailStore

if TYPE_CHECKING:
    from errdetails.factory import ErrorFactory


CAUSED_BY_SEPARATOR = " caused by: "


class DecoratedError(Exception):
    """
    Exception carrying a message, a detail store and its originating factory.

    Instances are read-only: every attribute is exposed through a property.
    ``details`` may be ``None`` when the factory's store factory returned no
    store; lookups then always miss and ``detailed()`` is the message alone.
    """

    def __init__(self, message: str, details: DetailStore | None, factory: ErrorFactory):
        super().__init__(message)
        self._message = message
        self._details = details
        self._factory = factory

        cause, found = self.lookup(CAUSED_BY_DETAIL_KEY)
        if found and isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def details(self) -> DetailStore | None:
        return self._details

    @property
    def factory(self) -> ErrorFactory:
        return self._factory

    def detailed(self) -> str:
        """Return the message line followed by the rendered details."""
        rendered = self._details.render() if self._details is not None else ""
        return f"{self._message}\n{rendered}"

    def lookup(self, key: Any) -> tuple[Any, bool]:
        """Return the most recent value stored under ``key`` and a found flag."""
        if self._details is None:
            return None, False
        return self._details.lookup(key)

    def get(self, key: Any, default: Any = None) -> Any:
        value, found = self.lookup(key)
        return value if found else default

    def __contains__(self, key: Any) -> bool:
        return self.lookup(key)[1]

    def caused(self, message: str, /, *details: Any, **named_details: Any) -> DecoratedError:
        """
        Return a new error caused by this one.

        The new message is ``"<message> caused by: <this message>"``. The
        reserved ``CAUSED_BY_DETAIL_KEY`` pair goes after the caller's
        details, so ``lookup(CAUSED_BY_DETAIL_KEY)`` always yields ``self``.
        """
        named = [(name, value) for name, value in named_details.items()]
        return self._factory.new(
            message + CAUSED_BY_SEPARATOR + self._message,
            *details,
            *named,
            (CAUSED_BY_DETAIL_KEY, self),
        )

    @property
    def cause(self) -> Any:
        """Immediate cause recorded by ``caused()``, or ``None``."""
        return self.get(CAUSED_BY_DETAIL_KEY)

    def iter_causes(self) -> Iterator[Any]:
        """Yield causes from the immediate one to the oldest."""
        current: Any = self
        while True:
            if not hasattr(current, "lookup"):
                return
            cause, found = current.lookup(CAUSED_BY_DETAIL_KEY)
            if not found or cause is None:
                return
            yield cause
            current = cause

    def root_cause(self) -> Any:
        """Oldest error in the causal history (``self`` if there is none)."""
        root: Any = self
        for root in self.iter_causes():
            pass
        return root

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self._message,
        }
        rendered = self._details.render() if self._details is not None else ""
        if rendered:
            result["details"] = rendered.splitlines()
        cause = self.cause
        if cause is not None:
            result["cause"] = str(cause)
        return result

    def __reduce__(self) -> tuple[Any, ...]:
        # Exception.args holds only the message
        return self.__class__, (self._message, self._details, self._factory)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._message!r})"


__all__ = [
    "CAUSED_BY_SEPARATOR",
    "DecoratedError",
]
