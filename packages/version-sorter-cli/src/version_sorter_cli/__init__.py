# SPDX-License-Identifier: MIT
"""Command-line interface for version_sorter."""

__version__ = "0.1.0"
