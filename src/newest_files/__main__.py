"""Application entry point for newest-files.

Allows running the tool as ``python -m newest_files``.
"""

from __future__ import annotations

from newest_files.app.cli import PROG_NAME, cli

__all__ = ["main"]


def main() -> None:
    """Main entry point for newest-files.

    Exit Codes:
        0: Listing (or "no files found" message) printed
        1: Root directory could not be walked
        2: Invalid or conflicting command-line options
    """
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
