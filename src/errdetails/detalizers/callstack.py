"""
Call-stack detalizer.

Captures where an error was created. Capturing is cheap (module, function,
file and line of each frame, no source lines); formatting happens the first
time the value is displayed and the result is cached. Several threads may
call ``detailed()`` on the same error, so the formatting runs once under a
lock.

Rendered form, innermost frame first::

    Call Stack :
    \tbilling.invoices.charge invoices.py:88
    \tbilling.api.post_charge api.py:41

Examples:
    >>> errors = ErrorFactory(new_callstack_detalizer())
    >>> err = errors.new("charge failed")
    >>> stack = err.get(CALL_STACK_DETAIL_KEY)
    >>> stack.frames[0].function
    'charge'

Tags:
    detalizer, call-stack, lazy-rendering, thread-safe, errdetails

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from types import FrameType
from typing import Any

from errdetails.keys import Label
from errdetails.logging import get_logger
from errdetails.protocols import Detalizer

logger = get_logger(__name__)

CALL_STACK_DETAIL_KEY = Label("Call Stack")

_PACKAGE = __name__.split(".")[0]


@dataclass(frozen=True, slots=True)
class StackFrame:
    """One captured frame."""

    module: str
    function: str
    filename: str
    lineno: int

    def format(self) -> str:
        return f"\t{self.module}.{self.function} {os.path.basename(self.filename)}:{self.lineno}\n"


class CallStack:
    """Captured call stack, rendered lazily and at most once."""

    def __init__(self, frames: tuple[StackFrame, ...]):
        self._frames = frames
        self._lock = threading.Lock()
        self._printed: str | None = None

    @property
    def frames(self) -> tuple[StackFrame, ...]:
        return self._frames

    def display(self) -> str:
        if self._printed is None:
            with self._lock:
                if self._printed is None:
                    self._printed = "\n" + "".join(frame.format() for frame in self._frames)
        return self._printed

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        return f"CallStack(frames={len(self._frames)})"


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def _capture(frame: FrameType | None, nest_level: int) -> tuple[StackFrame, ...]:
    captured = []
    while frame is not None and len(captured) < nest_level:
        code = frame.f_code
        captured.append(
            StackFrame(
                module=frame.f_globals.get("__name__", "?"),
                function=getattr(code, "co_qualname", code.co_name),
                filename=code.co_filename,
                lineno=frame.f_lineno,
            )
        )
        frame = frame.f_back
    return tuple(captured)


def new_callstack_detalizer(
    skip_frames: int = 0,
    nest_level: int = 1024,
    skip_internal: bool = True,
) -> Detalizer:
    """
    Create a detalizer attaching ``(CALL_STACK_DETAIL_KEY, CallStack)``.

    Args:
        skip_frames: Frames to drop, counted from the caller of the
            detalizer (after errdetails' own frames when ``skip_internal``).
        nest_level: Maximum number of frames kept.
        skip_internal: Drop leading frames that belong to errdetails, so
            the stack starts where the error was requested.

    Returns:
        A detalizer returning one detail, or an empty list when every
        frame was skipped.

    Raises:
        ValueError: If ``nest_level`` is less than 1 or ``skip_frames`` is
            negative.
    """
    if nest_level < 1:
        raise ValueError(f"nest_level must be >= 1, got {nest_level}")
    if skip_frames < 0:
        raise ValueError(f"skip_frames must be >= 0, got {skip_frames}")

    def detalize() -> list[tuple[Any, Any]]:
        frame: FrameType | None = sys._getframe(1)
        if skip_internal:
            while frame is not None and _is_internal(frame):
                frame = frame.f_back
        for _ in range(skip_frames):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            logger.debug("call_stack_skipped_entirely", skip_frames=skip_frames)
            return []
        return [(CALL_STACK_DETAIL_KEY, CallStack(_capture(frame, nest_level)))]

    return detalize


__all__ = [
    "CALL_STACK_DETAIL_KEY",
    "CallStack",
    "StackFrame",
    "new_callstack_detalizer",
]
