# SPDX-License-Identifier: MIT
"""Show the components a version string is split into."""

from __future__ import annotations

import click

from version_sorter import NumericComponent, VersionOverflowError, parse_version

from ..main import echo_error, echo_info, echo_warning


@click.command()
@click.argument("version")
def parse(version: str) -> None:
    """Print the components of VERSION, one per line.

    \b
    Examples:
        version-sorter parse 2.1-beta
    """
    try:
        parsed = parse_version(version)
    except VersionOverflowError as e:
        echo_error(f"Number too large in version {e.version!r}")
        raise SystemExit(1)

    if not parsed.components:
        echo_warning(f"No components found in {version!r}")
        return

    for component in parsed.components:
        if isinstance(component, NumericComponent):
            echo_info(f"numeric {component.value}")
        else:
            echo_info(f"text {component.text}")
