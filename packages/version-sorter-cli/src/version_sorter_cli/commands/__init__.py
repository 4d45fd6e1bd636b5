# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import sort, compare, parse

__all__ = ["sort", "compare", "parse"]
