"""Application runner for newest-files."""

from __future__ import annotations

import logging

from newest_files.core.config import ListingOptions
from newest_files.core.data.filesystem import DirectoryScanner, ExtensionFilter
from newest_files.core.sorting import sort_entries
from newest_files.types.models import FileEntry
from newest_files.utils.formatting import format_listing

logger = logging.getLogger(__name__)


class ApplicationRunner:
    """Runs the scan, sort and format pipeline for one set of options."""

    def __init__(
        self,
        options: ListingOptions,
        scanner: DirectoryScanner | None = None,
    ) -> None:
        """Initialize the application runner.

        Args:
            options: Validated listing options
            scanner: Directory scanner to use (built from the options'
                extensions when not provided)
        """
        self.options: ListingOptions = options
        self.scanner: DirectoryScanner = scanner or DirectoryScanner(
            ExtensionFilter(options.extensions),
        )

    def collect(self) -> list[FileEntry]:
        """Walk the root and return matching entries in sorted order.

        Raises:
            TraversalError: If the root directory cannot be walked
        """
        entries = self.scanner.scan(self.options.root)
        logger.info(
            "Collected %d entries",
            len(entries),
            extra={"root": str(self.options.root), "skipped": len(self.scanner.errors)},
        )
        logger.debug("Sorting entries", extra={"sort_mode": self.options.sort_mode.value})
        return sort_entries(entries, self.options.sort_mode)

    def run(self) -> str:
        """Run the full pipeline and return the rendered listing.

        Raises:
            TraversalError: If the root directory cannot be walked
        """
        entries = self.collect()
        return format_listing(
            entries,
            self.options.output_format,
            filtered=self.options.filtered,
        )
