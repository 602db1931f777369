"""Builder for a single configuration read.

Examples:
    Read ``settings.json`` from the first directory that has it, writing
    the default into ``~/.config/myapp`` when none does:

    >>> loaded = (
    ...     ConfigFile("settings.json")
    ...     .directory("~/.config/myapp")
    ...     .directory("/etc/myapp")
    ...     .default({"theme": "dark"})
    ...     .create_file_if_not_found()
    ...     .read()
    ... )  # doctest: +SKIP
    >>> loaded.value.theme  # doctest: +SKIP
    'dark'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Generic, TypeVar

from cfgseek.codec import ConfigCodec, to_data
from cfgseek.exceptions import EncodeError, InvalidRequestError
from cfgseek.formats import ConfigFormat, format_for_path, get_format
from cfgseek.loader import MISSING, LoadedConfig, load
from cfgseek.loader import location as _location
from cfgseek.paths import ENV_PATH_VAR, directories_from_env, expand_path
from cfgseek.paths import standard_directories as _standard_directories
from cfgseek.resolver import SearchSpec

log = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigFile(Generic[T]):
    """Accumulate search directories and options, then read once.

    Directories are searched in the order they were added. Every builder
    method returns the instance so calls can be chained. After :meth:`read`
    the request is consumed: reading again or changing it raises
    :class:`InvalidRequestError`.

    Args:
        filename: Name of the config file to look for in every directory.
    """

    def __init__(self, filename: str) -> None:
        self._filename = filename
        self._directories: list[Path] = []
        self._default: Any = MISSING
        self._create_if_missing = False
        self._format: ConfigFormat | None = None
        self._target: type[Any] | None = None
        self._consumed = False

    def __repr__(self) -> str:
        return (
            f"ConfigFile(filename={self._filename!r}, directories={[str(d) for d in self._directories]!r}, "
            f"has_default={self._default is not MISSING}, create_if_missing={self._create_if_missing})"
        )

    def _check_open(self) -> None:
        if self._consumed:
            raise InvalidRequestError(f"Config request for '{self._filename}' was already read")

    def directory(self, path: str | Path) -> ConfigFile[T]:
        """Append a search directory (``~`` and ``${VAR}`` are expanded)."""
        self._check_open()
        self._directories.append(expand_path(path))
        return self

    def directories(self, *paths: str | Path) -> ConfigFile[T]:
        """Append several search directories, in order."""
        for path in paths:
            self.directory(path)
        return self

    def standard_directories(self, app_name: str) -> ConfigFile[T]:
        """Append the current directory, ``~/.config/<app_name>`` and ``~``."""
        self._check_open()
        self._directories.extend(_standard_directories(app_name))
        return self

    def env_directories(self, var_name: str = ENV_PATH_VAR) -> ConfigFile[T]:
        """Append directories listed in an environment variable.

        Does nothing when the variable is unset or empty.
        """
        self._check_open()
        found = directories_from_env(var_name)
        if found:
            log.debug("Search directories from $%s: %s", var_name, found)
        self._directories.extend(found)
        return self

    def default(self, value: T) -> ConfigFile[T]:
        """Set the value used when no file is found.

        Whether the format can represent every value inside the default is
        checked when the request is read with file creation enabled.

        Raises:
            InvalidRequestError: If the value cannot be serialized.
        """
        self._check_open()
        try:
            to_data(value)
        except TypeError as exc:
            raise InvalidRequestError(str(exc)) from exc
        self._default = value
        return self

    def create_file_if_not_found(self) -> ConfigFile[T]:
        """Write the default to the first directory when no file is found."""
        self._check_open()
        self._create_if_missing = True
        return self

    def format(self, fmt: str | ConfigFormat) -> ConfigFile[T]:
        """Force a file format instead of inferring it from the filename suffix."""
        self._check_open()
        self._format = get_format(fmt) if isinstance(fmt, str) else fmt
        return self

    def target(self, target: type[T]) -> ConfigFile[T]:
        """Set the type config data is decoded into.

        Without this, the default's type is used, or ``Box`` when there is no default.
        """
        self._check_open()
        self._target = target
        return self

    @property
    def search(self) -> SearchSpec:
        """Snapshot of the directories and filename accumulated so far."""
        return SearchSpec(directories=tuple(self._directories), filename=self._filename)

    @property
    def codec(self) -> ConfigCodec[T]:
        """Codec used to decode found files and encode the default."""
        fmt = self._format or format_for_path(self._filename)
        target = self._target
        if target is None and self._default is not MISSING:
            target = type(self._default)
        return ConfigCodec(fmt, target)

    def _validate(self) -> None:
        self._check_open()
        if not self._filename:
            raise InvalidRequestError("A config filename is required")
        if self._create_if_missing:
            if self._default is MISSING:
                raise InvalidRequestError(
                    f"create_file_if_not_found() requires a default value for '{self._filename}'"
                )
            if not self._directories:
                raise InvalidRequestError(
                    f"create_file_if_not_found() requires at least one directory for '{self._filename}'"
                )
            codec = self.codec
            try:
                codec.encode(self._default)
            except EncodeError as exc:
                raise InvalidRequestError(
                    f"Default value for '{self._filename}' cannot be written as {codec.format.name}: {exc}"
                ) from exc

    def location(self) -> Path:
        """Return the path a read would use, without reading or writing.

        Raises:
            ConfigNotFoundError: Nothing was found and creation is not requested.
            InvalidRequestError: The request is inconsistent.
        """
        self._validate()
        return _location(self.search, create_if_missing=self._create_if_missing)

    def read(self) -> LoadedConfig[T]:
        """Resolve, then load or create the configuration. Consumes the request.

        Returns:
            The loaded value with its provenance.

        Raises:
            InvalidRequestError: Inconsistent request, raised before any filesystem access.
            MalformedConfigError: The found file could not be decoded.
            ConfigReadError: The found file could not be read.
            WriteFailedError: The default could not be written.
            NoConfigAndNoDefaultError: Nothing was found and no default was given.
        """
        self._validate()
        self._consumed = True
        search = self.search
        return load(
            search.resolve(),
            self.codec,
            search=search,
            default=self._default,
            create_if_missing=self._create_if_missing,
        )


def load_config(
    filename: str,
    directories: list[str | Path] | tuple[str | Path, ...],
    *,
    default: Any = MISSING,
    create_if_missing: bool = False,
    fmt: str | ConfigFormat | None = None,
    target: type[Any] | None = None,
) -> LoadedConfig[Any]:
    """Functional shorthand for a one-shot :class:`ConfigFile` read.

    Examples:
        >>> load_config("app.yml", ["~/.config/app", "/etc/app"], default={"debug": False})  # doctest: +SKIP
    """
    request: ConfigFile[Any] = ConfigFile(filename).directories(*directories)
    if default is not MISSING:
        request.default(default)
    if create_if_missing:
        request.create_file_if_not_found()
    if fmt is not None:
        request.format(fmt)
    if target is not None:
        request.target(target)
    return request.read()


__all__ = [
    "ConfigFile",
    "load_config",
]
