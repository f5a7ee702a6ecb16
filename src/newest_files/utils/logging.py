"""Logging infrastructure for newest-files.

Diagnostics go to standard error so that standard output carries only the
listing itself.
"""

import logging
import sys
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    *,
    log_level: str = "WARNING",
    enable_console: bool = True,
) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable the standard error handler

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logger = logging.getLogger(__name__)
        >>> logger.debug("Scanning directory tree")
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)  # pyright: ignore[reportAny]
    root_logger.setLevel(level)  # pyright: ignore[reportAny]

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        root_logger.addHandler(console_handler)

