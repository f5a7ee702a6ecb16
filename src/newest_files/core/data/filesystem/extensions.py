"""Extension normalization and case-insensitive suffix filtering."""

from __future__ import annotations

from collections.abc import Iterable

EXTENSION_SEPARATOR = "."


def normalize_extension(token: str) -> str:
    """Normalize a single extension token.

    Args:
        token: Extension as typed by the user, with or without a leading dot

    Returns:
        Extension guaranteed to start with a dot

    Examples:
        >>> normalize_extension("go")
        '.go'
        >>> normalize_extension(".TXT")
        '.TXT'
    """
    token = token.strip()
    return token if token.startswith(EXTENSION_SEPARATOR) else f"{EXTENSION_SEPARATOR}{token}"


def normalize_extensions(tokens: Iterable[str]) -> tuple[str, ...]:
    """Normalize extension tokens, dropping blank ones.

    Args:
        tokens: Raw extension tokens

    Returns:
        Tuple of normalized extensions in input order
    """
    return tuple(normalize_extension(token) for token in tokens if token.strip())


class ExtensionFilter:
    """Case-insensitive file name suffix matcher.

    An empty filter matches every name.
    """

    def __init__(self, extensions: Iterable[str] = ()) -> None:
        """Initialize the extension filter.

        Args:
            extensions: Extension tokens, normalized on construction
        """
        self.extensions: tuple[str, ...] = normalize_extensions(extensions)
        self._compiled: tuple[str, ...] = tuple(ext.lower() for ext in self.extensions)

    @property
    def is_empty(self) -> bool:
        """Return True when no extensions were given."""
        return not self._compiled

    def matches(self, name: str) -> bool:
        """Check if a file name ends with one of the extensions.

        Args:
            name: Base name of the file to check

        Returns:
            True if the filter is empty or the name matches, False otherwise
        """
        if self.is_empty:
            return True

        target = name.lower()
        return any(target.endswith(ext) for ext in self._compiled)

    def __repr__(self) -> str:
        return f"ExtensionFilter({list(self.extensions)!r})"
