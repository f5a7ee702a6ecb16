"""Directory scanner collecting file metadata for the listing."""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

from newest_files.exceptions import TraversalError
from newest_files.types.models import FileEntry

from .extensions import ExtensionFilter

logger = logging.getLogger(__name__)


def datetime_from_ns(timestamp_ns: int) -> datetime:
    """Convert a nanosecond POSIX timestamp to an aware UTC datetime.

    Sub-microsecond digits are truncated, so ordering by the result never
    contradicts ordering by the nanosecond value.
    """
    seconds, remainder_ns = divmod(timestamp_ns, 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=UTC) + timedelta(microseconds=remainder_ns // 1000)


class DirectoryScanner:
    """Scanner for traversing directory trees and collecting file entries.

    Provides recursive depth-first traversal with:
    - Case-insensitive extension filtering
    - Deterministic lexical visiting order within each directory
    - Graceful handling of per-entry permission and access errors
    - Fail-fast behaviour when the root itself cannot be read

    Symbolic links are examined with ``lstat`` and never followed, so a link
    is reported as an entry of its own and cannot introduce cycles.
    """

    def __init__(self, extension_filter: ExtensionFilter | None = None) -> None:
        """Initialize the directory scanner.

        Args:
            extension_filter: Filter selecting which entries are collected
                (None collects every non-directory entry)
        """
        self.extension_filter: ExtensionFilter = extension_filter or ExtensionFilter()
        self.errors: list[tuple[Path, OSError]] = []

    def scan(self, root: Path) -> list[FileEntry]:
        """Collect all matching entries under root.

        Args:
            root: Directory to walk

        Returns:
            File entries in walk order

        Raises:
            TraversalError: If root does not exist, is not a directory or
                cannot be listed
        """
        return list(self.iter_entries(root))

    def iter_entries(self, root: Path) -> Iterator[FileEntry]:
        """Yield matching entries under root in depth-first order.

        The root is validated and listed before the first entry is yielded,
        so a fatal error is raised before any partial result is produced.

        Args:
            root: Directory to walk

        Yields:
            FileEntry for every collected entry

        Raises:
            TraversalError: If root cannot be walked
        """
        self.errors = []
        children = self._list_root(root)
        logger.debug(
            "Scanning directory tree",
            extra={"root": str(root), "filter": list(self.extension_filter.extensions)},
        )
        yield from self._walk_children(children)

    def _list_root(self, root: Path) -> list[Path]:
        try:
            root_stat = root.stat()
        except OSError as exc:
            raise TraversalError(f"Cannot access directory: {exc.strerror or exc}", path=root) from exc

        if not stat.S_ISDIR(root_stat.st_mode):
            raise TraversalError("Not a directory", path=root)

        try:
            return sorted(root.iterdir())
        except OSError as exc:
            raise TraversalError(f"Cannot read directory: {exc.strerror or exc}", path=root) from exc

    def _walk_children(self, children: list[Path]) -> Iterator[FileEntry]:
        for item in children:
            try:
                item_stat = item.lstat()
            except OSError as exc:
                self._record_error(item, exc)
                continue

            if stat.S_ISDIR(item_stat.st_mode):
                try:
                    grandchildren = sorted(item.iterdir())
                except OSError as exc:
                    self._record_error(item, exc)
                    continue
                yield from self._walk_children(grandchildren)
                continue

            if self.extension_filter.matches(item.name):
                yield FileEntry(
                    path=item,
                    mod_time=datetime_from_ns(item_stat.st_mtime_ns),
                    size=item_stat.st_size,
                    mod_time_ns=item_stat.st_mtime_ns,
                )

    def _record_error(self, path: Path, exc: OSError) -> None:
        self.errors.append((path, exc))
        logger.warning("Error accessing %s: %s", path, exc.strerror or exc)
