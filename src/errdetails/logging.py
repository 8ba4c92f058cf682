"""
Structured logging for errdetails and the applications using it.

Decorated errors exist to be logged: ``detailed()`` is the operator view of
an error. This module configures structlog with one shared processor chain
and adds ``render_decorated_errors``, which turns any decorated error found
in an event into text (console) or a dict (JSON) so callers can simply write
``logger.error("upload_failed", error=err)``.

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="errdetails")
            ↓
        processor chain:
            1. TimeStamper (iso)
            2. merge_contextvars, add_log_level
            3. StackInfoRenderer, set_exc_info
            4. add_service_metadata
            5. render_decorated_errors
            6. JSONRenderer (or ConsoleRenderer for a tty)

Examples:
    >>> from errdetails.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=False, service="billing")
    >>> logger = get_logger(__name__)
    >>> logger.error("charge_failed", error=err)

Tags:
    logging, structlog, observability, errdetails

Doc-Types:
    - API Reference
    - Observability Guide
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from errdetails.protocols import DetailedError

# Store service name for metadata
_SERVICE_NAME = "errdetails"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service", _SERVICE_NAME)
    return event_dict


def _detailed_text(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for key, value in event_dict.items():
        if isinstance(value, DetailedError):
            event_dict[key] = value.detailed().rstrip("\n")
    return event_dict


def _detailed_dict(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for key, value in event_dict.items():
        if isinstance(value, DetailedError):
            to_dict = getattr(value, "to_dict", None)
            event_dict[key] = to_dict() if callable(to_dict) else value.detailed()
    return event_dict


def render_decorated_errors(json_format: bool = False) -> Processor:
    """Return a processor rendering decorated errors found in event values."""
    return _detailed_dict if json_format else _detailed_text


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "errdetails",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stdout.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
        render_decorated_errors(json_format),
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging too
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def configure_from_settings(settings: Any) -> None:
    """Configure logging from an ``ErrdetailsSettings`` instance."""
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_format == "json",
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "render_decorated_errors",
]
