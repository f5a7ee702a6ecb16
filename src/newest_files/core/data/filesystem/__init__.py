"""Filesystem operations module for directory scanning and extension filtering."""

from __future__ import annotations

from .extensions import ExtensionFilter, normalize_extension, normalize_extensions
from .scanner import DirectoryScanner

__all__ = [
    "DirectoryScanner",
    "ExtensionFilter",
    "normalize_extension",
    "normalize_extensions",
]
