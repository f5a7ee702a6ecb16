"""Test suite for the error taxonomy."""

from __future__ import annotations

from pathlib import Path

from newest_files.exceptions import (
    ConfigurationError,
    NewestFilesError,
    SortOptionConflictError,
    TraversalError,
)


class TestExceptionHierarchy:
    """Test exception classes."""

    def test_all_errors_share_base(self) -> None:
        """Test that every error derives from NewestFilesError."""
        for error_type in (ConfigurationError, SortOptionConflictError, TraversalError):
            assert issubclass(error_type, NewestFilesError)

    def test_base_error_context(self) -> None:
        """Test that context defaults to an empty dict."""
        error = NewestFilesError("boom")

        assert str(error) == "boom"
        assert error.context == {}

    def test_sort_option_conflict_message(self) -> None:
        """Test the fixed conflict message."""
        error = SortOptionConflictError()

        assert str(error) == "Only one sort option can be specified at a time"
        assert error.flags == []

    def test_traversal_error_includes_path(self) -> None:
        """Test that the path is part of the message and context."""
        error = TraversalError("Not a directory", path=Path("some/file"))

        assert str(error) == f"Not a directory (path: {Path('some/file')})"
        assert error.context == {"path": str(Path("some/file"))}

    def test_traversal_error_without_path(self) -> None:
        """Test the message when no path is known."""
        assert str(TraversalError("walk failed")) == "walk failed"
