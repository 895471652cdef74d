"""Structured logging configuration for hoshi.

Every hoshi module logs through structlog on top of the stdlib
``logging`` module, under the ``hoshi`` logger namespace. Nothing is
configured on import; applications that want hoshi's logs call
:func:`configure_logging` (or :func:`configure_from_settings`). Only the
``hoshi`` logger gets a handler, the root logger is left alone.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from hoshi.config import Settings

LOGGER_NAMESPACE = "hoshi"


def _build_processors(json_output: bool, colors: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))
    return processors


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Path | None = None,
    colors: bool = True,
    propagate: bool = False,
) -> logging.Logger:
    """Configure structured logging for the ``hoshi`` namespace.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to output JSON format
        log_file: Optional file to log to instead of stderr
        colors: Whether to use colors in console output
        propagate: Also pass records on to the root logger's handlers

    Returns:
        The configured stdlib ``hoshi`` logger
    """
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    namespace = logging.getLogger(LOGGER_NAMESPACE)
    for previous in list(namespace.handlers):
        namespace.removeHandler(previous)
        previous.close()
    namespace.addHandler(handler)
    namespace.setLevel(getattr(logging, level.upper(), logging.INFO))
    namespace.propagate = propagate

    structlog.configure(
        processors=_build_processors(json_output, colors),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return namespace


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    The logger always writes through the stdlib logger of the same name,
    so stdlib levels apply even before :func:`configure_logging` runs.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_from_settings(
    settings: Settings,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging from a :class:`~hoshi.config.Settings` object.

    Args:
        settings: Loaded settings
        log_file: Optional file to log to

    Returns:
        The configured stdlib ``hoshi`` logger
    """
    return configure_logging(
        level=settings.log_level,
        json_output=settings.json_logs,
        log_file=log_file,
        colors=not settings.json_logs,
    )
