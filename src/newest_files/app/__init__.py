"""Application module for newest-files."""

from __future__ import annotations

from newest_files.app.cli import cli
from newest_files.app.runner import ApplicationRunner

__all__ = [
    "cli",
    "ApplicationRunner",
]
