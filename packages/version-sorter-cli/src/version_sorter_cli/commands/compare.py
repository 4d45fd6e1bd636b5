# SPDX-License-Identifier: MIT
"""Compare two version strings."""

from __future__ import annotations

import click

from version_sorter import VersionOverflowError, compare_versions

from ..main import echo_error, echo_info

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print <, = or > for VERSION1 relative to VERSION2.

    \b
    Examples:
        version-sorter compare 1.9 1.10      # <
        version-sorter compare 1.0 1.0-rc    # >
    """
    try:
        result = compare_versions(version1, version2)
    except VersionOverflowError as e:
        echo_error(f"Number too large in version {e.version!r}")
        raise SystemExit(1)

    echo_info(_SYMBOLS[result])
