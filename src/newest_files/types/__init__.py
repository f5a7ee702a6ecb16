"""Type definitions for newest-files.

This package provides:
- Data models (immutable dataclasses)
- Sort mode and output format enumerations
"""

from newest_files.types.models import (
    FileEntry,
    OutputFormat,
    SortMode,
)

__all__ = [
    "FileEntry",
    "OutputFormat",
    "SortMode",
]
