"""Command-line interface for newest-files."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from newest_files.core.config import DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS, ListingOptions
from newest_files.exceptions import (
    ConfigurationError,
    SortOptionConflictError,
    TraversalError,
)
from newest_files.utils.formatting import encode_listing
from newest_files.utils.logging import configure_logging

PROG_NAME = "newest-files"
LOG_LEVEL_ENVVAR = "NEWEST_FILES_LOG_LEVEL"

try:
    __version__ = version(PROG_NAME)
except PackageNotFoundError:
    __version__ = "unknown"


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Args:
        ctx: Click context (required by Click callback signature)
        param: Click parameter (required by Click callback signature)
        value: Log level value to validate

    Returns:
        Normalized log level (uppercase)

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()
    if normalized_value not in VALID_LOG_LEVELS:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(VALID_LOG_LEVELS))}'
        )

    return normalized_value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option('-j', 'json_output', is_flag=True, help='Output in JSON format')
@click.option('-o', 'oldest', is_flag=True, help='Sort oldest to newest')
@click.option('-l', 'largest', is_flag=True, help='Sort by largest files first')
@click.option('-s', 'smallest', is_flag=True, help='Sort by smallest files first')
@click.option(
    '--directory', '-C',
    type=click.Path(path_type=Path),
    default=Path('.'),
    show_default=True,
    help='Directory to scan',
)
@click.option(
    '--log-level',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    envvar=LOG_LEVEL_ENVVAR,
    show_envvar=True,
    callback=validate_log_level,
    help='Diagnostics verbosity (DEBUG, INFO, WARNING, ERROR)',
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument('extensions', nargs=-1)
def cli(
    json_output: bool,
    oldest: bool,
    largest: bool,
    smallest: bool,
    directory: Path,
    log_level: str,
    extensions: tuple[str, ...],
) -> None:
    """List files under a directory, newest first.

    EXTENSIONS restrict the listing to matching files; the leading dot is
    optional and matching ignores case. Without extensions every file is
    listed.

    Examples:

        # Newest Go and text files
        newest-files go txt

        # Largest files of any type, as JSON
        newest-files -j -l

        # Oldest Markdown files under docs/
        newest-files -o -C docs .md
    """
    configure_logging(log_level=log_level)

    try:
        options = ListingOptions.from_flags(
            extensions=extensions,
            json_output=json_output,
            oldest=oldest,
            largest=largest,
            smallest=smallest,
            root=directory,
            log_level=log_level,
        )
    except SortOptionConflictError as e:
        raise click.UsageError(str(e))
    except ConfigurationError as e:
        raise click.BadParameter(str(e))

    from newest_files.app.runner import ApplicationRunner

    runner = ApplicationRunner(options)
    try:
        output = runner.run()
    except TraversalError as e:
        raise click.ClickException(str(e))

    click.echo(encode_listing(output), nl=False)
