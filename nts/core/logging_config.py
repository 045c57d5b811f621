"""
Logging Configuration Module.

This module provides centralized logging configuration for NTS.

The configuration is split in two steps so callers control where records go:

- ``get_subscriber`` builds a formatted handler writing to a sink (a text
  stream such as ``sys.stdout``) or a handler that discards everything when
  the sink is ``None``.
- ``init_subscriber`` installs that handler on the root logger and applies the
  module-specific levels.

Nothing is configured on import. The server calls ``setup_logging`` on startup,
and the test harness installs its own subscriber exactly once per process.
"""

import logging
import os
import sys
from typing import Optional, TextIO

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

DEFAULT_LOG_LEVEL = os.getenv("APP_LOG_LEVEL", "INFO").upper()
DEFAULT_LOG_FORMAT = os.getenv("APP_LOG_FORMAT", "detailed")

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "nts": "DEBUG",
    "nts.server": "INFO",
    "nts.testing": "DEBUG",
    # Third-party libraries (reduce noise)
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "asyncpg": "WARNING",
    "httpx": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "WARNING",
}


def _format_string(log_format: str) -> str:
    if log_format == "json":
        return JSON_FORMAT
    if log_format == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def get_subscriber(
    name: str,
    level: str = DEFAULT_LOG_LEVEL,
    sink: Optional[TextIO] = None,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> logging.Handler:
    """
    Build a log handler.

    Args:
        name: Handler name, used to recognise it on the root logger
        level: Minimum level the handler emits
        sink: Stream receiving formatted records; ``None`` discards all output
        log_format: One of ``simple``, ``detailed`` or ``json``

    Returns:
        A handler ready to be passed to ``init_subscriber``
    """
    handler: logging.Handler
    if sink is None:
        handler = logging.NullHandler()
    else:
        handler = logging.StreamHandler(sink)
        handler.setFormatter(logging.Formatter(_format_string(log_format), datefmt="%Y-%m-%d %H:%M:%S"))
    handler.set_name(name)
    handler.setLevel(level.upper())
    return handler


def init_subscriber(handler: logging.Handler) -> None:
    """
    Install ``handler`` as the only handler of the root logger.

    Args:
        handler: The handler returned by ``get_subscriber``
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    sink: Optional[TextIO] = None,
) -> None:
    """
    Configure console logging for the application.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        sink: Stream to write to, standard error when omitted
    """
    level = (log_level or DEFAULT_LOG_LEVEL).upper()
    fmt = log_format or DEFAULT_LOG_FORMAT
    init_subscriber(get_subscriber("nts", level, sink or sys.stderr, fmt))
    logging.getLogger(__name__).info("Logging configured: level=%s, format=%s", level, fmt)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
