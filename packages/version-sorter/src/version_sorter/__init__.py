# SPDX-License-Identifier: MIT
"""Human-friendly sorting of version strings.

Version strings are split into numeric and text components and compared
structurally, so "1.10" sorts after "1.9" and "1.0-beta" before "1.0".

Example:
    >>> from version_sorter import sort, reverse_sort, compare_versions
    >>>
    >>> sort(["1.10", "1.9", "1.0-beta", "1.0"])
    ['1.0-beta', '1.0', '1.9', '1.10']
    >>>
    >>> reverse_sort(["2.0", "10.0"])
    ['10.0', '2.0']
    >>>
    >>> compare_versions("1.0", "1.0.1")
    -1
"""

__version__ = "0.1.0"

from .parse import (
    Component,
    NumericComponent,
    TextComponent,
    ParsedVersion,
    parse_version,
    tokenize,
    VersionSorterError,
    VersionOverflowError,
    MAX_COMPONENTS,
    MAX_NUMERIC,
)
from .compare import (
    compare_components,
    compare_parsed,
    compare_versions,
    version_key,
)
from .sorting import (
    parse_all,
    sort,
    sort_indices,
    sort_parsed,
    reverse_sort,
)

__all__ = [
    # Parsing
    "Component",
    "NumericComponent",
    "TextComponent",
    "ParsedVersion",
    "parse_version",
    "tokenize",
    "VersionSorterError",
    "VersionOverflowError",
    "MAX_COMPONENTS",
    "MAX_NUMERIC",
    # Comparison
    "compare_components",
    "compare_parsed",
    "compare_versions",
    "version_key",
    # Sorting
    "parse_all",
    "sort",
    "sort_indices",
    "sort_parsed",
    "reverse_sort",
]
