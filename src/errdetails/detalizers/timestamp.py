"""
Timestamp detalizer.

Stamps every error with the moment it was created. The value keeps the
timezone-aware ``datetime`` for code and displays as ISO 8601 for
operators::

    Timestamp : 2025-12-26T10:00:05.123456+00:00

Inject ``clock`` for deterministic output in tests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from errdetails.keys import Label
from errdetails.protocols import Detalizer

TIMESTAMP_DETAIL_KEY = Label("Timestamp")


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Timestamp:
    """When an error was created."""

    at: datetime

    def display(self) -> str:
        return self.at.isoformat()


def new_timestamp_detalizer(clock: Callable[[], datetime] = utc_now) -> Detalizer:
    """Create a detalizer attaching ``(TIMESTAMP_DETAIL_KEY, Timestamp(clock()))``."""

    def detalize() -> list[tuple[Any, Any]]:
        return [(TIMESTAMP_DETAIL_KEY, Timestamp(clock()))]

    return detalize


__all__ = [
    "TIMESTAMP_DETAIL_KEY",
    "Timestamp",
    "new_timestamp_detalizer",
    "utc_now",
]
