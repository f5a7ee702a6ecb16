"""Ordering of collected file entries."""

from __future__ import annotations

from collections.abc import Iterable

from newest_files.exceptions import SortOptionConflictError
from newest_files.types.models import FileEntry, SortMode


def select_sort_mode(*, oldest: bool = False, largest: bool = False, smallest: bool = False) -> SortMode:
    """Map the mutually exclusive sort flags to a sort mode.

    Args:
        oldest: Sort oldest to newest
        largest: Sort largest files first
        smallest: Sort smallest files first

    Returns:
        Selected sort mode, NEWEST when no flag is set

    Raises:
        SortOptionConflictError: If more than one flag is set
    """
    requested = [
        mode
        for mode, flag in (
            (SortMode.OLDEST, oldest),
            (SortMode.LARGEST, largest),
            (SortMode.SMALLEST, smallest),
        )
        if flag
    ]
    if len(requested) > 1:
        raise SortOptionConflictError(flags=[mode.value for mode in requested])
    return requested[0] if requested else SortMode.NEWEST


def sort_entries(entries: Iterable[FileEntry], mode: SortMode = SortMode.NEWEST) -> list[FileEntry]:
    """Return entries ordered by the key and direction of mode.

    The sort is stable, so entries with equal keys keep their walk order.

    Args:
        entries: Collected file entries
        mode: Ordering to apply

    Returns:
        New sorted list
    """
    return sorted(entries, key=mode.key, reverse=mode.descending)
