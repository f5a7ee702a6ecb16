"""Newest Files - list files under a directory by age or size.

This package walks a directory tree, keeps the files matching optional
extension filters, and prints them ordered by modification time or size
as plain text or JSON.
"""

from newest_files.__main__ import main

__all__ = ["main"]
