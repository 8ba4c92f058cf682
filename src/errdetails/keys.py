"""
Typed detail keys.

Two flavors of key cover the two ways a detail is consumed:

- ``Key`` is an opaque token. It is matched by ``lookup()`` but never shows
  up in ``detailed()`` text. Use it for flags that drive control flow.
- ``Label`` carries operator-facing text. It renders in ``detailed()`` and
  is matched by ``lookup()`` like any other key.

Both compare by type and content, so ``Key("x")`` and ``Label("x")`` are
distinct keys, and a module exposing ``IS_CRITICAL = Label("Is Critical")``
forces consumers to query with the constant rather than a bare string.

Examples:
    >>> IS_RETRIABLE = Key("Is Retriable")
    >>> err = errdetails.new_with_details("Upload failed", (IS_RETRIABLE, True))
    >>> err.get(IS_RETRIABLE)
    True
    >>> err.detailed()
    'Upload failed\\n'
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Key:
    """Opaque, non-displayable detail key."""

    name: str

    def __repr__(self) -> str:
        return f"Key({self.name!r})"


@dataclass(frozen=True, slots=True)
class Label:
    """Displayable detail key or value."""

    text: str

    def display(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Label({self.text!r})"


# Reserved for DecoratedError.caused(); the value is always the immediate cause.
CAUSED_BY_DETAIL_KEY = Key("Caused By")


__all__ = [
    "Key",
    "Label",
    "CAUSED_BY_DETAIL_KEY",
]
