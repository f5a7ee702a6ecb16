"""Run options for newest-files.

Options are assembled from command-line flags and validated with Pydantic.
There is no configuration file; the only environment override is the log
level, resolved by the command-line layer.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from newest_files.core.data.filesystem.extensions import normalize_extensions
from newest_files.core.sorting import select_sort_mode
from newest_files.exceptions import ConfigurationError
from newest_files.types.models import OutputFormat, SortMode

VALID_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_ROOT: Final[Path] = Path(".")


class ListingOptions(BaseModel):
    """Validated options for a single listing run."""

    model_config = ConfigDict(frozen=True)

    extensions: Annotated[
        tuple[str, ...],
        Field(description="Normalized extension filters (empty matches everything)"),
    ] = ()
    sort_mode: Annotated[
        SortMode,
        Field(description="Ordering applied to collected entries"),
    ] = SortMode.NEWEST
    output_format: Annotated[
        OutputFormat,
        Field(description="Encoding of the rendered listing"),
    ] = OutputFormat.PLAIN
    root: Annotated[
        Path,
        Field(description="Directory the walk starts from"),
    ] = DEFAULT_ROOT
    log_level: Annotated[
        str,
        Field(description="Diagnostics logging level"),
    ] = DEFAULT_LOG_LEVEL

    @field_validator("extensions", mode="before")
    @classmethod
    def normalize_extension_tokens(cls, v: str | Sequence[str]) -> tuple[str, ...]:
        """Normalize raw extension tokens.

        Args:
            v: A single extension token or a sequence of tokens

        Returns:
            Tuple of normalized extensions with blank tokens dropped
        """
        if isinstance(v, str):
            v = (v,)
        return normalize_extensions(v)

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and upper-case the log level.

        Args:
            v: Log level name

        Returns:
            Upper-cased log level

        Raises:
            ValueError: If the level is unknown
        """
        normalized = v.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            msg = f"Invalid log level {v!r}. Valid options: {', '.join(sorted(VALID_LOG_LEVELS))}"
            raise ValueError(msg)
        return normalized

    @property
    def filtered(self) -> bool:
        """Return True when at least one extension filter is active."""
        return bool(self.extensions)

    @classmethod
    def from_flags(
        cls,
        *,
        extensions: Sequence[str] = (),
        json_output: bool = False,
        oldest: bool = False,
        largest: bool = False,
        smallest: bool = False,
        root: Path = DEFAULT_ROOT,
        log_level: str = DEFAULT_LOG_LEVEL,
    ) -> "ListingOptions":
        """Build options from raw command-line flags.

        Args:
            extensions: Positional extension tokens
            json_output: Render the listing as JSON
            oldest: Sort oldest to newest
            largest: Sort largest files first
            smallest: Sort smallest files first
            root: Directory to walk
            log_level: Diagnostics logging level

        Returns:
            Validated options

        Raises:
            SortOptionConflictError: If more than one sort flag is set
            ConfigurationError: If any other option is invalid
        """
        sort_mode = select_sort_mode(oldest=oldest, largest=largest, smallest=smallest)
        try:
            return cls(
                extensions=tuple(extensions),
                sort_mode=sort_mode,
                output_format=OutputFormat.JSON if json_output else OutputFormat.PLAIN,
                root=root,
                log_level=log_level,
            )
        except ValidationError as exc:
            raise ConfigurationError(
                format_validation_error(exc),
                context={"error_count": exc.error_count()},
            ) from exc


def format_validation_error(error: ValidationError) -> str:
    """Format a Pydantic validation error into one line per failing field.

    Args:
        error: Pydantic validation error

    Returns:
        Human-readable error description
    """
    lines: list[str] = []
    for err in error.errors():
        location = " -> ".join(str(part) for part in err["loc"]) or "options"
        lines.append(f"{location}: {err['msg']}")
    return "\n".join(lines)
