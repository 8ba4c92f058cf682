"""Ready-made detalizers: call stack and timestamp."""

from errdetails.detalizers.callstack import (
    CALL_STACK_DETAIL_KEY,
    CallStack,
    StackFrame,
    new_callstack_detalizer,
)
from errdetails.detalizers.timestamp import (
    TIMESTAMP_DETAIL_KEY,
    Timestamp,
    new_timestamp_detalizer,
    utc_now,
)

__all__ = [
    "CALL_STACK_DETAIL_KEY",
    "CallStack",
    "StackFrame",
    "new_callstack_detalizer",
    "TIMESTAMP_DETAIL_KEY",
    "Timestamp",
    "new_timestamp_detalizer",
    "utc_now",
]
