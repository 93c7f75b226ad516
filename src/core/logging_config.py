"""Structured logging configuration.

This module initializes structlog with a stable structured format.
Events are rendered as JSON and routed through the stdlib logging tree
so the CLI controls verbosity and stderr stays separate from output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_CONFIGURED = False


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    _configure_structlog()
    return structlog.get_logger(name)


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the root logger for CLI runs.

    Args:
        verbose: Emit debug and info events when true, warnings otherwise.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(level)


def _configure_structlog() -> None:
    """Configure structlog processors once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True
