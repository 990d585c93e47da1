"""Structured logging configuration.

The SDK only emits log events; configuring output is left to the host
application. ``setup_logging`` is a convenience for scripts and tests.
"""

import logging
import sys
from typing import Optional

import structlog

from ..config import get_settings


def setup_logging(log_level: Optional[str] = None, json_output: bool = True) -> None:
    """
    Setup structured logging on stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR); defaults to
            the FINDOLOGIC_LOG_LEVEL setting
        json_output: Render JSON lines instead of human readable console output
    """
    level = getattr(logging, (log_level or get_settings().log_level).upper())
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger("findologic_api").setLevel(level)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, e.g. ``get_logger(__name__)``."""
    return structlog.get_logger(name)
