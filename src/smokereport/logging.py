"""Structured logging configuration for smokereport."""

from __future__ import annotations

import sys
from typing import TextIO

import structlog


def configure_logging(
    log_level: str = "WARNING",
    json_format: bool = False,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structured logging with structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output JSON format; otherwise, console format.
        stream: Output stream (defaults to sys.stderr so stdout stays clean).
    """
    if stream is None:
        stream = sys.stderr

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(__import__("logging"), log_level.upper(), 30)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,  # Disable caching for tests
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a logger bound to a module name.

    Args:
        name: Logger name (typically module name).

    Returns:
        Lazy structlog logger; it picks up the configuration in effect
        when it is used, not when it is created.
    """
    return structlog.get_logger(logger_name=name)
