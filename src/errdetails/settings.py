"""Settings for the default error factory and logging.

Which detalizers the default factory carries is decided by plain settings,
read from ``ERRDETAILS_*`` environment variables or a ``.env`` file and
consumed by ``errdetails.defaults.build_factory``.

Examples:
    >>> import os
    >>> os.environ["ERRDETAILS_WITH_CALLSTACK"] = "true"
    >>> get_settings(_force_reload=True).with_callstack
    True

Tags:
    settings, configuration, pydantic, environment, errdetails

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ErrdetailsSettings(BaseSettings):
    """Configuration of the default factory.

    Fields
    ──────
    with_callstack        : Default factory attaches a call stack to each error
    callstack_skip_frames : Frames skipped after errdetails' own frames
    callstack_depth       : Maximum number of frames captured
    with_timestamp        : Default factory attaches a UTC timestamp
    log_level             : Structlog log level
    log_format            : "console" or "json"
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRDETAILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Detalizers ───────────────────────────────────────────────
    with_callstack: bool = False
    callstack_skip_frames: int = Field(default=0, ge=0)
    callstack_depth: int = Field(default=1024, ge=1)
    with_timestamp: bool = False

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"


_settings_cache: dict[str, ErrdetailsSettings] = {}


def get_settings(*, _force_reload: bool = False) -> ErrdetailsSettings:
    """Load, validate, and cache an :class:`ErrdetailsSettings` instance.

    Parameters
    ----------
    _force_reload:
        Bypass cache and re-read the environment.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]
    settings = ErrdetailsSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings (tests, or after changing the environment)."""
    _settings_cache.clear()


__all__ = [
    "ErrdetailsSettings",
    "get_settings",
    "clear_settings_cache",
]
