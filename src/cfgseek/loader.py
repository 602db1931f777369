"""Turn a resolution outcome into a configuration value.

Decision order:

1. A found file is read and decoded. The default is never consulted, even
   when decoding fails.
2. Nothing found, default given, no creation requested: the default is
   returned and nothing is written.
3. Nothing found, default given, creation requested: the default is written
   to the first search directory and returned.
4. Nothing found, no default: :class:`NoConfigAndNoDefaultError`.

Writes are not atomic and not locked; when two processes race, the last
writer wins. A directory created before a failed write is left in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from cfgseek.exceptions import (
    ConfigNotFoundError,
    ConfigReadError,
    DecodeError,
    EncodeError,
    InvalidRequestError,
    MalformedConfigError,
    NoConfigAndNoDefaultError,
    WriteFailedError,
)
from cfgseek.resolver import Found

if TYPE_CHECKING:
    from cfgseek.codec import ConfigCodec
    from cfgseek.resolver import ResolutionResult, SearchSpec

log = logging.getLogger(__name__)

T = TypeVar("T")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class ConfigSource(str, Enum):
    """Provenance of a loaded configuration value.

    Attributes:
        FILE: Read from an existing file.
        DEFAULT: Default value, nothing found and nothing written.
        CREATED: Default value, freshly written to disk.
    """

    FILE = "file"
    DEFAULT = "default"
    CREATED = "created"


@dataclass(frozen=True, slots=True)
class LoadedConfig(Generic[T]):
    """A resolved configuration value and where it came from.

    Attributes:
        value: The configuration value.
        source: How the value was obtained.
        path: File that was read or created, ``None`` for default-only values.
    """

    value: T
    source: ConfigSource
    path: Path | None = None

    @property
    def found(self) -> bool:
        return self.source is ConfigSource.FILE

    @property
    def created(self) -> bool:
        return self.source is ConfigSource.CREATED

    @property
    def default_only(self) -> bool:
        return self.source is ConfigSource.DEFAULT


def _read_found(path: Path, codec: ConfigCodec[T]) -> LoadedConfig[T]:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigReadError(path, exc) from exc

    try:
        value = codec.decode(raw)
    except DecodeError as exc:
        raise MalformedConfigError(path, exc) from exc

    log.debug("Loaded config from %s", path)
    return LoadedConfig(value=value, source=ConfigSource.FILE, path=path)


def _materialize(default: T, search: SearchSpec, codec: ConfigCodec[T]) -> LoadedConfig[T]:
    directory = search.first_directory
    if directory is None:
        raise InvalidRequestError("Cannot create a config file without any search directory")

    target = directory / search.filename
    try:
        content = codec.encode(default)
    except EncodeError as exc:
        raise InvalidRequestError(f"Default value for '{search.filename}' cannot be written: {exc}") from exc
    try:
        directory.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
    except OSError as exc:
        raise WriteFailedError(target, exc) from exc

    log.info("Created default config file %s", target)
    return LoadedConfig(value=default, source=ConfigSource.CREATED, path=target)


def load(
    resolution: ResolutionResult,
    codec: ConfigCodec[T],
    *,
    search: SearchSpec,
    default: T = MISSING,
    create_if_missing: bool = False,
) -> LoadedConfig[T]:
    """Produce the final configuration value for a resolution outcome.

    Args:
        resolution: Outcome of :func:`cfgseek.resolver.resolve`.
        codec: Decoder/encoder for the target type.
        search: The search that produced ``resolution``; its first directory
            receives a created file.
        default: Fallback value. Leave unset for "no default".
        create_if_missing: Write ``default`` to disk when no file was found.

    Returns:
        The loaded value with its provenance.

    Raises:
        MalformedConfigError: The found file could not be decoded.
        ConfigReadError: The found file could not be read.
        WriteFailedError: The default could not be written.
        NoConfigAndNoDefaultError: Nothing was found and no default was given.
        InvalidRequestError: Creation was requested with no directory to write to,
            or the default cannot be encoded in the file format.
    """
    if isinstance(resolution, Found):
        return _read_found(resolution.path, codec)

    if default is MISSING:
        raise NoConfigAndNoDefaultError(search.filename, search.directories)

    if not create_if_missing:
        log.debug("Config file %s not found, using default", search.filename)
        return LoadedConfig(value=default, source=ConfigSource.DEFAULT)

    return _materialize(default, search, codec)


def location(search: SearchSpec, *, create_if_missing: bool = False) -> Path:
    """Return the path a read would use, without reading anything.

    Args:
        search: Directories and filename to probe.
        create_if_missing: If True and nothing is found, return the path
            in the first directory where the file would be created.

    Raises:
        ConfigNotFoundError: Nothing was found and creation is not requested.
        InvalidRequestError: Creation is requested but there is no directory.
    """
    resolution = search.resolve()
    if isinstance(resolution, Found):
        return resolution.path
    if not create_if_missing:
        raise ConfigNotFoundError(search.filename, search.directories)
    if search.first_directory is None:
        raise InvalidRequestError("Cannot create a config file without any search directory")
    return search.first_directory / search.filename


__all__ = [
    "MISSING",
    "ConfigSource",
    "LoadedConfig",
    "load",
    "location",
]
