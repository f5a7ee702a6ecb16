"""Test suite for logging configuration."""

from __future__ import annotations

import logging
import sys

from newest_files.utils.logging import DEFAULT_LOG_FORMAT, configure_logging


class TestConfigureLogging:
    """Test configure_logging."""

    def test_sets_level(self) -> None:
        """Test that the root level follows the requested level."""
        configure_logging(log_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_lowercase_level(self) -> None:
        """Test that level names are case-insensitive."""
        configure_logging(log_level="error")

        assert logging.getLogger().level == logging.ERROR

    def test_unknown_level_falls_back_to_warning(self) -> None:
        """Test the fallback for an unknown level name."""
        configure_logging(log_level="NOPE")

        assert logging.getLogger().level == logging.WARNING

    def test_console_handler_writes_to_stderr(self) -> None:
        """Test that exactly one stderr handler is installed."""
        configure_logging()
        configure_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        handler = handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr  # pyright: ignore[reportUnknownMemberType]
        assert handler.formatter is not None
        assert handler.formatter._fmt == DEFAULT_LOG_FORMAT  # pyright: ignore[reportPrivateUsage]

    def test_console_disabled(self) -> None:
        """Test that no handler is installed when console output is off."""
        configure_logging(enable_console=False)

        assert logging.getLogger().handlers == []

