"""Specialized exceptions raised by cfgseek.

Exception hierarchy::

    CfgseekError
        ConfigError (base for all resolve/load errors)
            InvalidRequestError (bad builder usage, also ValueError)
            ConfigNotFoundError (no searched directory has the file)
                NoConfigAndNoDefaultError (nothing found, nothing to fall back to)
            MalformedConfigError (file found but could not be decoded)
            ConfigReadError (file found but could not be read)
            WriteFailedError (default could not be written to disk)
        DecodeError (format or target conversion failure, also ValueError)
        EncodeError (value cannot be written in the chosen format, also ValueError)
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class CfgseekError(Exception):
    """Base exception for every error raised by cfgseek."""


class ConfigError(CfgseekError):
    """Base exception for configuration resolution and loading errors.

    Catch this to handle any failure of a single ``read()`` call.
    """


class InvalidRequestError(ConfigError, ValueError):
    """The configuration request is inconsistent.

    Raised before any filesystem access, e.g. when file creation is
    requested without a default, or when a request is read twice.
    """


class ConfigNotFoundError(ConfigError):
    """No searched directory contains the config file.

    Attributes:
        filename: Name of the file that was searched for.
        directories: Directories that were searched, in priority order.
    """

    def __init__(self, filename: str, directories: Sequence[Path], *, detail: str = "") -> None:
        """Initialize ConfigNotFoundError.

        Args:
            filename: Name of the file that was searched for.
            directories: Directories that were searched, in priority order.
            detail: Optional suffix appended to the message.
        """
        searched = ", ".join(str(d) for d in directories) or "<no directories>"
        super().__init__(f"Config file '{filename}' not found (searched: {searched}){detail}")
        self.filename = filename
        self.directories = tuple(directories)


class NoConfigAndNoDefaultError(ConfigNotFoundError):
    """No file was found in any searched directory and no default was given."""

    def __init__(self, filename: str, directories: Sequence[Path]) -> None:
        """Initialize NoConfigAndNoDefaultError.

        Args:
            filename: Name of the file that was searched for.
            directories: Directories that were searched, in priority order.
        """
        super().__init__(filename, directories, detail=" and no default was provided")


class MalformedConfigError(ConfigError):
    """A configuration file was found but could not be decoded.

    The default value is never used in place of a broken file.

    Attributes:
        path: Path of the offending file.
        cause: Underlying decode error.
    """

    def __init__(self, path: Path, cause: BaseException) -> None:
        """Initialize MalformedConfigError.

        Args:
            path: Path of the offending file.
            cause: Underlying decode error.
        """
        super().__init__(f"Malformed config file {path}: {cause}")
        self.path = path
        self.cause = cause


class ConfigReadError(ConfigError):
    """A configuration file was found but reading it failed.

    Attributes:
        path: Path of the file that could not be read.
        cause: Underlying OS error (permission denied, etc.).
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        """Initialize ConfigReadError.

        Args:
            path: Path of the file that could not be read.
            cause: Underlying OS error.
        """
        super().__init__(f"Cannot read config file {path}: {cause}")
        self.path = path
        self.cause = cause


class WriteFailedError(ConfigError):
    """Writing the default configuration to disk failed.

    Attributes:
        path: Target path of the write.
        cause: Underlying OS error.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        """Initialize WriteFailedError.

        Args:
            path: Target path of the write.
            cause: Underlying OS error.
        """
        super().__init__(f"Cannot write default config to {path}: {cause}")
        self.path = path
        self.cause = cause


class DecodeError(CfgseekError, ValueError):
    """Raw bytes could not be turned into a configuration value."""


class EncodeError(CfgseekError, ValueError):
    """A configuration value could not be turned into file content."""


__all__ = [
    "CfgseekError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigReadError",
    "DecodeError",
    "EncodeError",
    "InvalidRequestError",
    "MalformedConfigError",
    "NoConfigAndNoDefaultError",
    "WriteFailedError",
]
