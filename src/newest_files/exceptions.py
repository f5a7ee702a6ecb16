"""Error taxonomy for newest-files."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class NewestFilesError(Exception):
    """Base exception for all newest-files errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible error context
        """Initialize NewestFilesError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible error context


class SortOptionConflictError(NewestFilesError):
    """Exception raised when more than one sort option is requested."""

    def __init__(
        self,
        flags: list[str] | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible error context
    ) -> None:
        """Initialize SortOptionConflictError.

        Args:
            flags: Names of the conflicting sort flags
            context: Additional context information
        """
        full_context = context or {}
        if flags is not None:
            full_context["flags"] = flags

        super().__init__("Only one sort option can be specified at a time", full_context)
        self.flags: list[str] = flags or []


class ConfigurationError(NewestFilesError):
    """Exception raised when run options fail validation."""


class TraversalError(NewestFilesError):
    """Exception raised when the root of a walk cannot be traversed."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible error context
    ) -> None:
        """Initialize TraversalError.

        Args:
            message: Error message
            path: Root path that could not be walked
            context: Additional context information
        """
        full_context = context or {}
        if path is not None:
            full_context["path"] = str(path)

        super().__init__(message, full_context)
        self.path: Path | None = path

    def __str__(self) -> str:
        """Return error message with the offending path."""
        base_message = super().__str__()
        if self.path is not None:
            return f"{base_message} (path: {self.path})"
        return base_message
