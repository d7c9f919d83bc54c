"""Logging configuration: structlog on top of standard library logging."""

from __future__ import annotations

import logging
import sys

import structlog


def setup_stdlib_logging(level: str) -> None:
    """Send stdlib log records to stderr at *level*."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level.upper())
    root_logger.addHandler(handler)


def setup_structlog(json: bool = False) -> None:
    """Configure structlog processors; JSON lines when *json* is set."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging(level)
    setup_structlog(json)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)
