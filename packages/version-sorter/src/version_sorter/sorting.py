# SPDX-License-Identifier: MIT
"""Stable sorting of version strings.

Every input is parsed once (tagged with its position), the parsed versions
are merge sorted with the structural comparator, and the result is rebuilt
from the original objects. Ties keep their input order.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .compare import compare_parsed
from .parse import ParsedVersion, VersionInput, parse_version

logger = logging.getLogger(__name__)


def _merge(left: list[ParsedVersion], right: list[ParsedVersion]) -> list[ParsedVersion]:
    merged: list[ParsedVersion] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # Take from the left run on ties to keep the sort stable
        if compare_parsed(right[j], left[i]) < 0:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(items: list[ParsedVersion]) -> list[ParsedVersion]:
    if len(items) <= 1:
        return list(items)
    middle = len(items) // 2
    return _merge(_merge_sort(items[:middle]), _merge_sort(items[middle:]))


def sort_parsed(parsed: Sequence[ParsedVersion]) -> list[ParsedVersion]:
    """Return parsed versions in ascending order.

    The sort is stable: versions that compare equal keep their relative order.
    """
    logger.debug("Sorting %d versions", len(parsed))
    return _merge_sort(list(parsed))


def parse_all(versions: Sequence[VersionInput]) -> list[ParsedVersion]:
    """Parse every version, tagging each with its position.

    Raises:
        VersionOverflowError: If any version has a number above 4294967295;
            nothing is returned for the other versions
    """
    return [parse_version(version, index) for index, version in enumerate(versions)]


def sort_indices(versions: Sequence[VersionInput]) -> list[int]:
    """Return the original positions of versions in ascending version order.

    Examples:
        >>> sort_indices(["1.10", "1.2", "1.9"])
        [1, 2, 0]
    """
    return [p.index for p in sort_parsed(parse_all(versions))]


def sort(versions: Sequence[VersionInput]) -> list[VersionInput]:
    """Sort version strings in ascending version order.

    Args:
        versions: Version strings (str or bytes); malformed strings are sorted
            by whatever components can be extracted from them

    Returns:
        A new list holding the same objects as versions

    Raises:
        VersionOverflowError: If any version has a number above 4294967295

    Examples:
        >>> sort(["1.9", "1.10", "1.2"])
        ['1.2', '1.9', '1.10']
        >>> sort(["1.0", "1.0-beta"])
        ['1.0-beta', '1.0']
    """
    return [versions[i] for i in sort_indices(versions)]


def reverse_sort(versions: Sequence[VersionInput]) -> list[VersionInput]:
    """Return the exact reverse of sort(versions).

    Versions that compare equal therefore come out in reverse input order.

    Examples:
        >>> reverse_sort(["1.9", "1.10", "1.2"])
        ['1.10', '1.9', '1.2']
    """
    result = sort(versions)
    result.reverse()
    return result
