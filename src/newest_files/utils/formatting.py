"""Pure formatting utilities for rendering a file listing.

This module provides stateless functions converting sorted file entries into
the plain-text or JSON listing written to standard output. All functions are
pure with no side effects.
"""

import json
import os
from collections.abc import Sequence
from typing import Final

from newest_files.types.models import FileEntry, OutputFormat

NO_FILES_MESSAGE: Final[str] = "No files found."
NO_MATCHING_FILES_MESSAGE: Final[str] = "No files found with the specified suffixes."


def format_plain(entries: Sequence[FileEntry]) -> str:
    """Render entries as one path per line.

    Args:
        entries: Sorted file entries

    Returns:
        Newline-terminated listing, empty string for no entries

    Examples:
        >>> format_plain([])
        ''
    """
    return "".join(f"{entry.path}\n" for entry in entries)


def format_json(entries: Sequence[FileEntry]) -> str:
    """Render entries as a compact JSON array of path strings.

    Non-ASCII characters are kept as-is; bytes of a file name that
    are not valid UTF-8 appear as backslash escapes such as ``\\xff``, so the
    result is always encodable. The result has no trailing newline.

    Args:
        entries: Sorted file entries

    Returns:
        JSON array such as ``["a.go","b.go"]``
    """
    return json.dumps([json_safe_path(entry) for entry in entries], ensure_ascii=False, separators=(",", ":"))


def format_empty_message(*, filtered: bool) -> str:
    """Return the informational message for an empty listing.

    Args:
        filtered: Whether extension filters were given

    Returns:
        Newline-terminated human-readable message
    """
    message = NO_MATCHING_FILES_MESSAGE if filtered else NO_FILES_MESSAGE
    return f"{message}\n"


def format_listing(
    entries: Sequence[FileEntry],
    output_format: OutputFormat = OutputFormat.PLAIN,
    *,
    filtered: bool = False,
) -> str:
    """Render sorted entries in the requested format.

    An empty listing renders the same informational message in every format.

    Args:
        entries: Sorted file entries
        output_format: Encoding to use
        filtered: Whether extension filters were given

    Returns:
        Rendered listing ready to be written to standard output
    """
    if not entries:
        return format_empty_message(filtered=filtered)

    if output_format is OutputFormat.JSON:
        return format_json(entries)
    return format_plain(entries)


def json_safe_path(entry: FileEntry) -> str:
    """Return the entry path as text without lone surrogates.

    Undecodable file name bytes, which the filesystem layer carries as
    surrogate escapes, are rendered as ``\\xNN`` sequences.

    Args:
        entry: File entry to render

    Returns:
        Path text safe to encode as UTF-8
    """
    return os.fsencode(entry.path).decode("utf-8", "backslashreplace")


def encode_listing(listing: str) -> bytes:
    """Encode a rendered listing for standard output.

    File name bytes that were not valid UTF-8 are written back unchanged,
    matching what the filesystem holds.

    Args:
        listing: Output of format_listing

    Returns:
        Bytes ready for the binary standard output stream
    """
    return os.fsencode(listing)
