"""Structlog wiring for the ``url_normalizer`` logger hierarchy.

Every module logs through :func:`get_logger`, which wraps a stdlib logger.
Until :func:`configure_logging` is called, events therefore follow the
caller's stdlib ``logging`` setup (by default: nothing below WARNING, and
never on stdout).
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional, TextIO

import structlog

from url_normalizer.config import settings

PACKAGE_LOGGER = "url_normalizer"


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the stdlib logger *name*."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(
    environment: Optional[str] = None,
    log_level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a structlog-rendering handler to the package logger.

    Only the ``url_normalizer`` logger is touched; the root logger and the
    caller's handlers are left alone.

    Args:
        environment: ``"production"`` for newline-delimited JSON, anything
                     else for the console renderer. Defaults to
                     ``settings.environment``.
        log_level:   Stdlib level name, e.g. ``"DEBUG"`` to see per-URL
                     ``normalizer.normalized`` events. Defaults to
                     ``settings.log_level``.
        stream:      Destination; defaults to ``sys.stderr``.

    Returns:
        The configured package logger.
    """
    environment = environment or settings.environment
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    stream = stream or sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if environment == "production":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False

    # Preset loading is chatty at INFO; keep it quiet in production.
    presets_level = logging.WARNING if environment == "production" else logging.NOTSET
    logging.getLogger(f"{PACKAGE_LOGGER}.presets").setLevel(presets_level)
    return package_logger
