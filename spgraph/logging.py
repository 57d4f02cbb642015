"""Centralized logging configuration for spgraph.

All package loggers hang off the ``spgraph`` root logger. Records go to
stderr so that CLI query results on stdout stay machine-readable. The initial
level can be set through the ``SPGRAPH_LOG_LEVEL`` environment variable.
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "spgraph"
LOG_LEVEL_ENV = "SPGRAPH_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def parse_level(level: Union[int, str]) -> int:
    """Convert a level name ("debug", "WARNING") or number into a level int.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return resolved


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``spgraph`` root logger.

    Repeated calls are no-ops until ``reset_logging`` is called.

    Args:
        level: Logging level. Defaults to ``SPGRAPH_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if level is None:
        level = parse_level(os.environ.get(LOG_LEVEL_ENV, "INFO"))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees package records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a package logger that inherits the root ``spgraph`` setup.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the root ``spgraph`` logger and its handlers."""
    setup_root_logger()
    level = parse_level(level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the setup (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
