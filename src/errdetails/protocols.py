"""
Canonical protocol definitions for errdetails.

Every seam of the package is a structural protocol rather than a base class:
detail stores, detail providers, displayable keys/values and decorated errors
are recognized by shape. Any object matching the shape works, so callers can
plug in their own store or error type without inheriting from ours.

Architecture:
    ::

        protocols.py
        ├── Displayable   : key/value exposing explicit text for operators
        ├── DetailStore   : immutable lookup + render back-end
        ├── StoreFactory  : builds a DetailStore from ordered pairs
        ├── Detalizer     : nullary provider of automatic details
        └── DetailedError : what ErrorFactory.convert_to_error accepts as-is

    Consumers:
        render.py, chain.py, decorated.py, factory.py, logging.py

Guardrails:
    ❌ DON'T: Rely on ``__str__`` to decide whether something is rendered
    ✅ DO: Implement ``display()`` on key/value types meant for operators

    ❌ DON'T: Add implementation logic to protocol classes
    ✅ DO: Keep protocols pure contracts

Tags:
    protocol, detail-store, detalizer, display, errdetails, contracts

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from errdetails.decorated import DecoratedError


@runtime_checkable
class Displayable(Protocol):
    """
    Explicit textual-conversion capability for detail keys and values.

    Every Python object has ``__str__``, so string conversion alone cannot
    tell "meant for operators" apart from "internal token". A key or value
    shows up in ``DecoratedError.detailed()`` only when it implements
    ``display()`` (or is a plain ``str``). Everything else stays reachable
    through ``lookup()`` but is omitted from text.

    Examples:
        >>> class Severity:
        ...     def __init__(self, level: str):
        ...         self.level = level
        ...     def display(self) -> str:
        ...         return f"severity={self.level}"
        >>> isinstance(Severity("high"), Displayable)
        True
    """

    def display(self) -> str:
        """Return operator-facing text. Empty string means "nothing to show"."""
        ...


@runtime_checkable
class DetailStore(Protocol):
    """
    Immutable key/value storage behind a decorated error.

    ``lookup`` returns ``(value, found)``; a miss is ``(None, False)`` and
    never raises. ``render`` returns the operator text, one line per
    displayable entry, each terminated by a newline.
    """

    def lookup(self, key: Any) -> tuple[Any, bool]:
        """Return the most recently stored value for ``key`` and a found flag."""
        ...

    def render(self) -> str:
        """Return the textual representation of the stored details."""
        ...


#: Builds a store from caller details followed by detalizer output.
#: Returning ``None`` is allowed: lookups then miss and render is empty.
StoreFactory: TypeAlias = Callable[[Sequence[tuple[Any, Any]]], "DetailStore | None"]

#: Nullary provider of automatic details, invoked once per ``ErrorFactory.new``.
#: Returning ``None`` is the same as returning no pairs.
Detalizer: TypeAlias = Callable[[], "Iterable[tuple[Any, Any]] | None"]


@runtime_checkable
class DetailedError(Protocol):
    """
    Capability set of a decorated error.

    ``ErrorFactory.convert_to_error`` returns any object satisfying this
    protocol unchanged instead of re-wrapping it.
    """

    def detailed(self) -> str:
        """Return the message followed by the rendered details."""
        ...

    def lookup(self, key: Any) -> tuple[Any, bool]:
        """Return the value of the detail with ``key`` and a found flag."""
        ...

    def caused(self, message: str, /, *details: Any, **named_details: Any) -> DecoratedError:
        """Return a new error recording this one as its cause."""
        ...
