"""Data models for newest-files.

This module defines the immutable dataclass collected during a directory walk
and the closed enumerations that select ordering and output encoding.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


@dataclass(slots=True, frozen=True)
class FileEntry:
    """Immutable metadata snapshot of a single non-directory filesystem entry.

    Created once by the directory scanner and never mutated afterwards.
    ``mod_time_ns`` keeps the full filesystem resolution that ``mod_time``
    truncates to microseconds; it is 0 when unknown.
    """

    path: Path
    mod_time: datetime
    size: int
    mod_time_ns: int = 0


class SortMode(str, Enum):
    """Closed enumeration of supported orderings.

    Each member knows its sort key and direction, so the ordering table
    lives in exactly one place.
    """

    NEWEST = "newest"
    OLDEST = "oldest"
    LARGEST = "largest"
    SMALLEST = "smallest"

    @property
    def key(self) -> Callable[[FileEntry], tuple[datetime, int] | int]:
        """Return the attribute accessor used as the sort key."""
        if self in (SortMode.NEWEST, SortMode.OLDEST):
            return _mod_time_key
        return _size_key

    @property
    def descending(self) -> bool:
        """Return True when larger keys come first."""
        return self in (SortMode.NEWEST, SortMode.LARGEST)


def _mod_time_key(entry: FileEntry) -> tuple[datetime, int]:
    return entry.mod_time, entry.mod_time_ns


def _size_key(entry: FileEntry) -> int:
    return entry.size


class OutputFormat(str, Enum):
    """Enumeration for listing encodings."""

    PLAIN = "plain"
    JSON = "json"
