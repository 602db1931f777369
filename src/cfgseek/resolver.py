"""Locate a configuration file in prioritized directories.

Resolution only probes for existence. It never opens a file and never
fails: missing directories are simply non-matches.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Union

log = logging.getLogger(__name__)

Probe = Callable[[Path], bool]


def _is_file(path: Path) -> bool:
    return path.is_file()


@dataclass(frozen=True, slots=True)
class Found:
    """The file exists at ``path``, found while probing ``directory``.

    ``directory`` is the search directory as listed, which differs from
    ``path.parent`` when the filename contains a subpath. It defaults to
    ``path.parent`` when not given.
    """

    path: Path
    directory: Path = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.directory is None:
            object.__setattr__(self, "directory", self.path.parent)


@dataclass(frozen=True, slots=True)
class NotFound:
    """No searched directory contains the file."""


ResolutionResult = Union[Found, NotFound]


def resolve(
    directories: Iterable[Path],
    filename: str,
    *,
    probe: Probe | None = None,
) -> ResolutionResult:
    """Return the first directory, in order, that contains ``filename``.

    Args:
        directories: Candidate directories, highest priority first. Duplicates are allowed.
        filename: File name to look for in each directory.
        probe: Existence check applied to each candidate path. Defaults to ``Path.is_file``.

    Returns:
        ``Found(directory / filename, directory)`` for the first match, ``NotFound()`` otherwise.
        Directories after the first match are not probed.

    Examples:
        >>> resolve([], "app.json")
        NotFound()
    """
    check = probe or _is_file
    for directory in directories:
        candidate = Path(directory) / filename
        if check(candidate):
            log.debug("Config file found: %s", candidate)
            return Found(candidate, Path(directory))
        log.debug("Config file not in %s", directory)
    return NotFound()


@dataclass(frozen=True, slots=True)
class SearchSpec:
    """Ordered directories plus the file name to look for in each.

    Attributes:
        directories: Candidate directories, highest priority first.
        filename: File name searched in every directory.
    """

    directories: tuple[Path, ...]
    filename: str

    @property
    def first_directory(self) -> Path | None:
        """Highest-priority directory, where new files are created."""
        return self.directories[0] if self.directories else None

    def resolve(self, *, probe: Probe | None = None) -> ResolutionResult:
        """Run :func:`resolve` over this search spec."""
        return resolve(self.directories, self.filename, probe=probe)


__all__ = [
    "Found",
    "NotFound",
    "Probe",
    "ResolutionResult",
    "SearchSpec",
    "resolve",
]
