"""Shared utility modules.

This package provides pure, stateless listing renderers and the logging
setup used by the command-line entry point.
"""

from newest_files.utils.formatting import (
    NO_FILES_MESSAGE,
    NO_MATCHING_FILES_MESSAGE,
    encode_listing,
    format_empty_message,
    format_json,
    format_listing,
    format_plain,
    json_safe_path,
)
from newest_files.utils.logging import configure_logging

__all__ = [
    # Formatting utilities
    "NO_FILES_MESSAGE",
    "NO_MATCHING_FILES_MESSAGE",
    "encode_listing",
    "format_empty_message",
    "format_json",
    "format_listing",
    "format_plain",
    "json_safe_path",
    # Logging
    "configure_logging",
]
