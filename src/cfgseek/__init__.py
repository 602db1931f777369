"""cfgseek: find, load and materialize a single configuration file.

A file name is searched in an ordered list of directories; the first
directory containing it wins. When no directory does, an optional default
is returned, and optionally written to the highest-priority directory so
the next run finds it.

Examples:
    >>> from cfgseek import ConfigFile
    >>> loaded = (
    ...     ConfigFile("person.json")
    ...     .directory("~/.config/people")
    ...     .default({"name": "Daniel", "age": 32})
    ...     .create_file_if_not_found()
    ...     .read()
    ... )  # doctest: +SKIP
    >>> loaded.value.name, loaded.source.value  # doctest: +SKIP
    ('Daniel', 'created')
"""

from cfgseek.codec import ConfigCodec
from cfgseek.exceptions import (
    CfgseekError,
    ConfigError,
    ConfigNotFoundError,
    ConfigReadError,
    DecodeError,
    EncodeError,
    InvalidRequestError,
    MalformedConfigError,
    NoConfigAndNoDefaultError,
    WriteFailedError,
)
from cfgseek.formats import ConfigFormat, JsonFormat, YamlFormat, format_for_path, get_format
from cfgseek.loader import MISSING, ConfigSource, LoadedConfig, load, location
from cfgseek.meta import __version__
from cfgseek.paths import directories_from_env, expand_path, standard_directories
from cfgseek.request import ConfigFile, load_config
from cfgseek.resolver import Found, NotFound, SearchSpec, resolve

__all__ = [
    "MISSING",
    "CfgseekError",
    "ConfigCodec",
    "ConfigError",
    "ConfigFile",
    "ConfigFormat",
    "ConfigNotFoundError",
    "ConfigReadError",
    "ConfigSource",
    "DecodeError",
    "EncodeError",
    "Found",
    "InvalidRequestError",
    "JsonFormat",
    "LoadedConfig",
    "MalformedConfigError",
    "NoConfigAndNoDefaultError",
    "NotFound",
    "SearchSpec",
    "WriteFailedError",
    "YamlFormat",
    "__version__",
    "directories_from_env",
    "expand_path",
    "format_for_path",
    "get_format",
    "load",
    "load_config",
    "location",
    "resolve",
    "standard_directories",
]
