"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from bulkedit.core.config import BulkEditConfig


@pytest.fixture
def xdg_home(tmp_path: Path) -> Iterator[Path]:
    """Point every XDG directory below a temporary home."""
    home = tmp_path / "xdg"
    env = {
        "XDG_CONFIG_HOME": str(home / "config"),
        "XDG_CACHE_HOME": str(home / "cache"),
        "XDG_RUNTIME_DIR": str(home / "runtime"),
    }
    with patch.dict(os.environ, env):
        yield home


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    """Directory temporary manifests are written to."""
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def config(scratch_dir: Path) -> BulkEditConfig:
    """Configuration writing manifests to the scratch directory."""
    return BulkEditConfig(tmp_dir=scratch_dir, opener="true", auto_refresh=False)


@pytest.fixture
def workdir(tmp_path: Path) -> Iterator[Path]:
    """A populated directory that is the working directory for the test."""
    path = tmp_path / "work"
    path.mkdir()
    (path / "f1").write_text("one")
    (path / "f2").write_text("two")
    (path / "f3").write_text("three")
    (path / "sub").mkdir()

    previous = os.getcwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)
