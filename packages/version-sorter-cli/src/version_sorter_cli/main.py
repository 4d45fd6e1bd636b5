# SPDX-License-Identifier: MIT
"""CLI entry point for version-sorter command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from version_sorter import VersionSorterError

from .config import SortConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SortConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SortConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


_HANDLER_NAME = "version-sorter-cli"


def _configure_logging(verbose: bool) -> None:
    """Send library debug logging to the current stderr when verbose."""
    library_logger = logging.getLogger("version_sorter")
    for handler in list(library_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            library_logger.removeHandler(handler)

    if not verbose:
        library_logger.setLevel(logging.NOTSET)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    library_logger.addHandler(handler)
    library_logger.setLevel(logging.DEBUG)


@click.group()
@click.version_option(package_name="version-sorter")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory's pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Sort version strings the way humans expect.

    \b
    Examples:
        git tag | version-sorter sort
        version-sorter sort --reverse tags.txt
        version-sorter compare 1.0-beta 1.0
        version-sorter parse v10.3a
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    _configure_logging(verbose)


# Import and register commands
from .commands import sort, compare, parse

cli.add_command(sort.sort)
cli.add_command(compare.compare)
cli.add_command(parse.parse)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionSorterError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
