# SPDX-License-Identifier: MIT
"""Structural comparison of parsed versions.

Components are compared position by position:
- numbers by magnitude, text by character value (shorter prefix first)
- a number sorts after text at the same position ("1.0" > "1.0-beta")

When one version runs out of components, the other's next component decides:
an extra number makes it greater ("1.0.1" > "1.0"), extra text makes it
smaller ("1.0-rc" < "1.0").
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Union

from .parse import (
    Component,
    NumericComponent,
    ParsedVersion,
    TextComponent,
    VersionInput,
    parse_version,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_text(a: TextComponent, b: TextComponent) -> int:
    """Compare two text slices byte by byte; a shorter prefix sorts first."""
    text_a = a.as_bytes()
    text_b = b.as_bytes()
    if text_a == text_b:
        return 0
    return -1 if text_a < text_b else 1


def compare_components(a: Component, b: Component) -> int:
    """Compare two components at the same position.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b
    """
    if isinstance(a, NumericComponent) and isinstance(b, NumericComponent):
        return _sign(a.value - b.value)
    if isinstance(a, TextComponent) and isinstance(b, TextComponent):
        return _compare_text(a, b)
    # Mixed: release-style numbers outrank tags
    return 1 if isinstance(a, NumericComponent) else -1


def compare_parsed(a: ParsedVersion, b: ParsedVersion) -> int:
    """Compare two parsed versions.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b
    """
    comps_a = a.components
    comps_b = b.components

    for ca, cb in zip(comps_a, comps_b):
        cmp = compare_components(ca, cb)
        if cmp:
            return cmp

    len_a = len(comps_a)
    len_b = len(comps_b)
    if len_a == len_b:
        return 0

    if len_a < len_b:
        return -1 if comps_b[len_a].is_numeric else 1
    return 1 if comps_a[len_b].is_numeric else -1


def compare_versions(
    version1: Union[VersionInput, ParsedVersion],
    version2: Union[VersionInput, ParsedVersion],
) -> int:
    """Compare two version strings.

    Args:
        version1: First version (string, bytes or ParsedVersion)
        version2: Second version (string, bytes or ParsedVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionOverflowError: If either version has a number above 4294967295

    Examples:
        >>> compare_versions("1.9", "1.10")
        -1
        >>> compare_versions("1.0-beta", "1.0")
        -1
        >>> compare_versions("1.0.1", "1.0")
        1
        >>> compare_versions("1_0", "1.0")
        0
    """
    v1 = version1 if isinstance(version1, ParsedVersion) else parse_version(version1)
    v2 = version2 if isinstance(version2, ParsedVersion) else parse_version(version2)
    return compare_parsed(v1, v2)


_ParsedKey = cmp_to_key(compare_parsed)


def version_key(version: Union[VersionInput, ParsedVersion]) -> Any:
    """Return a sort key for a version, suitable for sorted(), min() and max().

    Examples:
        >>> sorted(["1.10", "1.9", "1.0-rc"], key=version_key)
        ['1.0-rc', '1.9', '1.10']
    """
    parsed = version if isinstance(version, ParsedVersion) else parse_version(version)
    return _ParsedKey(parsed)
