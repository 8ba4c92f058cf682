"""
Default factory and package-level convenience functions.

``errdetails.new("...")`` is handy, but a hidden mutable singleton is not.
The default factory here is an ordinary, immutable ``ErrorFactory`` built
from ``ErrdetailsSettings`` on first use and cached. Code that needs other
detalizers or another store builds its own factory and passes it around;
nothing here can be swapped out at runtime except by reloading settings.

Examples:
    >>> import errdetails
    >>> err = errdetails.new_with_details("Upload failed", ("bucket", "reports"))
    >>> err.get("bucket")
    'reports'
    >>> errdetails.errorf("Retry {} of {}", 2, 5).message
    'Retry 2 of 5'
"""

from __future__ import annotations

from typing import Any

from errdetails.decorated import DecoratedError
from errdetails.detalizers.callstack import new_callstack_detalizer
from errdetails.detalizers.timestamp import new_timestamp_detalizer
from errdetails.factory import ErrorFactory
from errdetails.protocols import Detalizer
from errdetails.settings import ErrdetailsSettings, get_settings

_factory_cache: dict[str, ErrorFactory] = {}


def build_factory(settings: ErrdetailsSettings) -> ErrorFactory:
    """Build an ``ErrorFactory`` with the detalizers enabled in ``settings``."""
    detalizers: list[Detalizer] = []
    if settings.with_callstack:
        detalizers.append(
            new_callstack_detalizer(
                skip_frames=settings.callstack_skip_frames,
                nest_level=settings.callstack_depth,
            )
        )
    if settings.with_timestamp:
        detalizers.append(new_timestamp_detalizer())
    return ErrorFactory(*detalizers)


def get_default_factory(*, _force_reload: bool = False) -> ErrorFactory:
    """Return the cached settings-driven default factory."""
    if not _force_reload and "default" in _factory_cache:
        return _factory_cache["default"]
    factory = build_factory(get_settings(_force_reload=_force_reload))
    _factory_cache["default"] = factory
    return factory


def clear_default_factory() -> None:
    """Drop the cached default factory; the next call rebuilds it."""
    _factory_cache.clear()


def new(message: str) -> DecoratedError:
    """Return an error that formats as ``message``."""
    return get_default_factory().new(message)


def new_with_details(message: str, /, *details: Any, **named_details: Any) -> DecoratedError:
    """Return an error that formats as ``message`` with the given details."""
    return get_default_factory().new(message, *details, **named_details)


def errorf(fmt: str, /, *args: Any, **kwargs: Any) -> DecoratedError:
    """Return an error whose message is ``fmt.format(*args, **kwargs)``."""
    return get_default_factory().errorf(fmt, *args, **kwargs)


def convert_to_error(e: BaseException | None) -> DecoratedError | None:
    """Upgrade ``e`` to a decorated error, preserving already decorated ones."""
    return get_default_factory().convert_to_error(e)


__all__ = [
    "build_factory",
    "clear_default_factory",
    "convert_to_error",
    "errorf",
    "get_default_factory",
    "new",
    "new_with_details",
]
