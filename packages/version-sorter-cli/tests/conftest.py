# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with an empty pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "test-project"
version = "1.0.0"
"""
    )

    return project_dir


@pytest.fixture
def tags_file(tmp_path: Path) -> Path:
    """Create a file of version tags, one per line."""
    path = tmp_path / "tags.txt"
    path.write_text("v1.10\nv1.9\n\nv1.0-rc1\n  v1.0  \n")
    return path
