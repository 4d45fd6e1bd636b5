# SPDX-License-Identifier: MIT
"""Sort version strings read from files or stdin."""

from __future__ import annotations

from typing import IO

import click
from click.core import ParameterSource

from version_sorter import VersionOverflowError, parse_all, sort_parsed

from ..config import ConfigError
from ..main import echo_error, echo_info, pass_context, Context


def _read_lines(
    files: tuple[IO[bytes], ...],
    strip: bool,
    skip_blank: bool,
    unique: bool,
) -> tuple[list[bytes], list[int]]:
    """Collect input lines and their 0-based positions across all files.

    Lines are kept as bytes so input in any encoding can be sorted.

    Returns:
        Tuple of (versions, line_numbers) of equal length
    """
    versions: list[bytes] = []
    line_numbers: list[int] = []
    seen: set[bytes] = set()
    position = 0

    for stream in files:
        for line in stream:
            text = line.rstrip(b"\r\n")
            if strip:
                text = text.strip()
            current = position
            position += 1

            if skip_blank and not text:
                continue
            if unique:
                if text in seen:
                    continue
                seen.add(text)

            versions.append(text)
            line_numbers.append(current)

    return versions, line_numbers


def _from_default(click_ctx: click.Context, name: str) -> bool:
    return click_ctx.get_parameter_source(name) in (None, ParameterSource.DEFAULT)


@click.command()
@click.argument("files", nargs=-1, type=click.File("rb"), default=("-",))
@click.option(
    "--reverse/--no-reverse",
    default=False,
    help="Print the highest version first.",
)
@click.option(
    "--indices",
    is_flag=True,
    help="Print 0-based input line positions instead of the versions.",
)
@click.option(
    "--strip/--no-strip",
    default=True,
    help="Strip surrounding whitespace from each line.",
)
@click.option(
    "--skip-blank/--keep-blank",
    default=True,
    help="Drop empty lines.",
)
@click.option(
    "--unique/--no-unique",
    default=False,
    help="Drop repeated lines, keeping the first.",
)
@pass_context
def sort(
    ctx: Context,
    files: tuple[IO[bytes], ...],
    reverse: bool,
    indices: bool,
    strip: bool,
    skip_blank: bool,
    unique: bool,
) -> None:
    """Sort versions, one per line, from FILES or stdin.

    Defaults for the options can be set in the [tool.version-sorter]
    table of pyproject.toml.

    \b
    Examples:
        git tag | version-sorter sort
        version-sorter sort --reverse tags.txt
        version-sorter sort --indices tags.txt
    """
    try:
        config = ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    # Command-line flags override configuration
    click_ctx = click.get_current_context()
    if _from_default(click_ctx, "reverse"):
        reverse = config.reverse
    if _from_default(click_ctx, "strip"):
        strip = config.strip
    if _from_default(click_ctx, "skip_blank"):
        skip_blank = config.skip_blank
    if _from_default(click_ctx, "unique"):
        unique = config.unique

    versions, line_numbers = _read_lines(files, strip, skip_blank, unique)

    try:
        ordered = sort_parsed(parse_all(versions))
    except VersionOverflowError as e:
        line = line_numbers[e.index] + 1 if e.index is not None else "?"
        echo_error(
            f"Line {line}: number too large in version "
            f"{e.version.decode('utf-8', 'replace')!r}"
        )
        raise SystemExit(1)

    if reverse:
        ordered.reverse()

    if ctx.verbose:
        click.echo(f"Sorted {len(ordered)} version(s)", err=True)

    for parsed in ordered:
        if indices:
            echo_info(str(line_numbers[parsed.index]))
        else:
            click.echo(parsed.original)
