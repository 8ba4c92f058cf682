"""
Shared pytest fixtures and configuration for errdetails tests.

This module provides:
- Cache cleanup for settings and the default factory (test isolation)
- Displayable/opaque dummy keys and values
- A fixed clock for deterministic timestamps
"""

import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

# Ensure errdetails package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from errdetails.defaults import clear_default_factory
from errdetails.settings import clear_settings_cache


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests without explicit markers as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration", "slow"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Cache Cleanup Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_default_factory(monkeypatch):
    """Rebuild settings and the default factory from a clean environment."""
    for name in (
        "ERRDETAILS_WITH_CALLSTACK",
        "ERRDETAILS_CALLSTACK_SKIP_FRAMES",
        "ERRDETAILS_CALLSTACK_DEPTH",
        "ERRDETAILS_WITH_TIMESTAMP",
        "ERRDETAILS_LOG_LEVEL",
        "ERRDETAILS_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    clear_default_factory()
    yield
    clear_settings_cache()
    clear_default_factory()


# =============================================================================
# Dummy Keys and Values
# =============================================================================


class Shown:
    """Displayable dummy; equal when texts are equal."""

    def __init__(self, text: str):
        self.text = text

    def display(self) -> str:
        return self.text

    def __eq__(self, other):
        return isinstance(other, Shown) and other.text == self.text

    def __hash__(self):
        return hash(self.text)

    def __repr__(self):
        return f"Shown({self.text!r})"


class Opaque:
    """Non-displayable dummy; compared by identity."""


@pytest.fixture
def shown():
    return Shown


@pytest.fixture
def opaque():
    return Opaque


@pytest.fixture
def fixed_now():
    return datetime(2017, 10, 31, 22, 0, 5, tzinfo=UTC)


@pytest.fixture
def fixed_clock(fixed_now):
    return lambda: fixed_now
