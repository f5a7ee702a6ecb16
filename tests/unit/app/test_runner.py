"""Test suite for the application runner."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from newest_files.app.runner import ApplicationRunner
from newest_files.core.config import ListingOptions
from newest_files.core.data.filesystem import DirectoryScanner
from newest_files.exceptions import TraversalError
from newest_files.types.models import FileEntry, SortMode

FileFactory = Callable[..., Path]


class TestApplicationRunner:
    """Test the ApplicationRunner class."""

    def test_runner_builds_scanner_from_options(self) -> None:
        """Test that the default scanner uses the options' extensions."""
        runner = ApplicationRunner(ListingOptions(extensions=("go", "txt")))  # pyright: ignore[reportArgumentType]

        assert runner.scanner.extension_filter.extensions == (".go", ".txt")

    def test_runner_uses_injected_scanner(self) -> None:
        """Test that an explicit scanner is used as-is."""
        scanner = DirectoryScanner()

        runner = ApplicationRunner(ListingOptions(), scanner=scanner)

        assert runner.scanner is scanner

    def test_collect_sorts_entries(self, scenario_dir: Path) -> None:
        """Test that collect returns entries in the selected order."""
        options = ListingOptions(root=scenario_dir, sort_mode=SortMode.LARGEST)

        entries = ApplicationRunner(options).collect()

        assert [e.path.name for e in entries] == ["c.txt", "a.go", "b.go"]

    def test_run_plain(self, scenario_dir: Path) -> None:
        """Test rendering of a filtered plain listing."""
        options = ListingOptions.from_flags(extensions=["go"], root=scenario_dir)

        output = ApplicationRunner(options).run()

        assert output == f"{scenario_dir / 'a.go'}\n{scenario_dir / 'b.go'}\n"

    def test_run_with_mock_scanner(self) -> None:
        """Test the pipeline independently of the filesystem."""
        scanner = MagicMock(spec=DirectoryScanner)
        scanner.errors = []
        scanner.scan.return_value = [  # pyright: ignore[reportAny]
            FileEntry(Path("old.txt"), datetime(2020, 1, 1), 1),
            FileEntry(Path("new.txt"), datetime(2024, 1, 1), 1),
        ]
        options = ListingOptions.from_flags(json_output=True, oldest=True, root=Path("anywhere"))

        output = ApplicationRunner(options, scanner=scanner).run()

        assert output == '["old.txt","new.txt"]'
        scanner.scan.assert_called_once_with(Path("anywhere"))  # pyright: ignore[reportAny]

    def test_run_empty_filtered(self, tmp_path: Path) -> None:
        """Test the filtered empty message."""
        options = ListingOptions.from_flags(extensions=["rs"], root=tmp_path)

        assert ApplicationRunner(options).run() == "No files found with the specified suffixes.\n"

    def test_run_propagates_traversal_error(self, tmp_path: Path) -> None:
        """Test that fatal walk errors reach the caller."""
        options = ListingOptions(root=tmp_path / "missing")

        with pytest.raises(TraversalError):
            _ = ApplicationRunner(options).run()
