"""
Per-detail text rendering.

One rule turns a (key, value) detail into at most one line of operator text.
Every consumer that needs human-readable output (``DetailChain.render``,
custom stores, the logging processor) goes through it, so the line format
stays the same everywhere.

Key and value are classified independently: each is "displayable" when it
implements a callable ``display()`` returning a ``str``, or is a ``str``.
Classes are never displayable, even when they define ``display``. Then:

    both non-empty   ->  "<key> : <value>"
    one non-empty    ->  that text alone
    both empty       ->  "" (no line at all)

The ``" : "`` separator is fixed; log parsers downstream split on it.

Examples:
    >>> render_detail("retries", "3")
    'retries : 3'
    >>> render_detail(Key("internal"), "visible value")
    'visible value'
    >>> render_detail(object(), 42)
    ''
"""

from __future__ import annotations

from typing import Any

from errdetails.protocols import Displayable

SEPARATOR = " : "


def display_text(obj: Any) -> str:
    """Return the operator text of ``obj``, or ``""`` if it is not displayable."""
    # classes expose ``display`` as an unbound function
    if isinstance(obj, type):
        return ""
    if isinstance(obj, Displayable):
        display = getattr(obj, "display", None)
        if not callable(display):
            return ""
        text = display()
        return text if isinstance(text, str) else ""
    if isinstance(obj, str):
        # str subclasses (e.g. str enums) render their raw value
        return str.__str__(obj)
    return ""


def render_detail(key: Any, value: Any) -> str:
    """Render one detail as a single line without the trailing newline."""
    key_text = display_text(key)
    value_text = display_text(value)
    if key_text and value_text:
        return f"{key_text}{SEPARATOR}{value_text}"
    return key_text or value_text


__all__ = [
    "SEPARATOR",
    "display_text",
    "render_detail",
]
