"""Shared pytest fixtures for the cfgseek test suite."""

from __future__ import annotations

# Disable Rich colors and force wide terminal BEFORE any imports
# Rich checks these at import time
import os

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"
os.environ["FORCE_COLOR"] = "0"
os.environ["COLUMNS"] = "200"  # Prevent text wrapping in CLI output

import pathlib
import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

from cfgseek.paths import ENV_PATH_VAR

# pylint: disable=redefined-outer-name


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return the root directory containing persistent test fixtures."""

    return pathlib.Path(__file__).parent / "fixtures"


@pytest.fixture
def get_fixture_path(fixtures_root: Path) -> Callable[[str], Path]:
    """Build a path helper bound to the shared fixtures directory."""

    def _get(subdir: str) -> Path:
        """Return the absolute path for a given fixture subdirectory."""

        return fixtures_root / subdir

    return _get


@pytest.fixture
def copy_fixture(
    get_fixture_path: Callable[[str], Path],
    tmp_path: Path,
) -> Callable[..., Path]:
    """Copy a fixture file into the pytest temp directory."""

    def _copy(subdir: str, fixture_name: str, dest_name: str | Path | None = None) -> Path:
        """Copy the requested fixture file and return the destination path."""

        src = get_fixture_path(subdir) / fixture_name
        dst = tmp_path / (dest_name or fixture_name)
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dst)
        return dst

    return _copy


@pytest.fixture(autouse=True)
def _isolate_search_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ``$CFGSEEK_PATH`` out of the tests."""
    monkeypatch.delenv(ENV_PATH_VAR, raising=False)


class CountingProbe:
    """Existence probe that records every path it is asked about."""

    def __init__(self) -> None:
        self.probed: list[Path] = []

    def __call__(self, path: Path) -> bool:
        self.probed.append(path)
        return path.is_file()


@pytest.fixture
def counting_probe() -> CountingProbe:
    """Return a fresh probe-counting stub for resolver tests."""
    return CountingProbe()


@pytest.fixture
def search_dirs(tmp_path: Path) -> list[Path]:
    """Four candidate directories, highest priority first. None exist yet."""
    return [tmp_path / f"dir{i}" for i in range(4)]
