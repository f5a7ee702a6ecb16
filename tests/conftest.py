"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Fixed reference point so relative ages never depend on wall-clock drift
BASE_TIME: float = time.time() - 10_000

FileFactory = Callable[..., Path]


@pytest.fixture
def make_file(tmp_path: Path) -> FileFactory:
    """Return a factory creating files under tmp_path.

    The factory accepts a relative name, an optional byte size and an age in
    seconds; larger ages give older modification times.
    """

    def _make(name: str, *, size: int = 0, age: float = 0.0) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"x" * size)
        mtime = BASE_TIME - age
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def scenario_dir(make_file: FileFactory, tmp_path: Path) -> Path:
    """Directory with a.go (newest), b.go (older) and c.txt (oldest)."""
    _ = make_file("a.go", size=500, age=0)
    _ = make_file("b.go", size=10, age=60)
    _ = make_file("c.txt", size=2000, age=120)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level changed by configure_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
