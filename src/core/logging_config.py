"""Structured logging configuration.

This module initializes structlog with a stable JSON line format.
Modules call get_logger(__name__) and emit event names with keyword fields.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure process-wide structured logging.

    Args:
        level: Minimum level name, e.g. ``"INFO"``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger bound to the module name.
    """
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Create a print logger bound to the current stderr stream."""
    return structlog.PrintLogger(file=sys.stderr)
