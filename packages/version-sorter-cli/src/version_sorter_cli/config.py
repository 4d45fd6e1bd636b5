# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


# Table holding the CLI defaults
TOOL_TABLE = "version-sorter"


@dataclass
class SortConfig:
    """Defaults for the sort command, loaded from [tool.version-sorter].

    Attributes:
        project_dir: Directory the configuration was loaded from
        reverse: Sort in descending order
        strip: Strip surrounding whitespace from input lines
        skip_blank: Drop lines that are empty (after stripping)
        unique: Drop lines whose text has already been seen
    """

    project_dir: Optional[Path] = None
    reverse: bool = False
    strip: bool = True
    skip_blank: bool = True
    unique: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SortConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            SortConfig instance

        Raises:
            ConfigError: If the file is invalid or holds wrongly typed options
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "SortConfig":
        """Create SortConfig from a parsed pyproject.toml dictionary."""
        table = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        unknown = sorted(set(table) - {"reverse", "strip", "skip-blank", "unique"})
        if unknown:
            raise ConfigError(f"Unknown option(s) in [tool.{TOOL_TABLE}]: {', '.join(unknown)}")

        return cls(
            project_dir=project_dir,
            reverse=_get_bool(table, "reverse", False),
            strip=_get_bool(table, "strip", True),
            skip_blank=_get_bool(table, "skip-blank", True),
            unique=_get_bool(table, "unique", False),
        )


def _get_bool(table: dict[str, Any], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(
            f"[tool.{TOOL_TABLE}] {key} must be true or false, got {value!r}"
        )
    return value


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory holding a pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current == current.parent:
            return None
        current = current.parent


def load_config(project_dir: Optional[str | Path] = None) -> SortConfig:
    """Load CLI configuration.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        SortConfig instance; defaults when no pyproject.toml is found

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
        if project_dir is None:
            return SortConfig()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return SortConfig.from_pyproject(project_path)

    return SortConfig(project_dir=project_path)
