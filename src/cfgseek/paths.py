"""Path helpers for building search directory lists.

Expansion is purely textual: nothing here touches the filesystem.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

# Pattern for environment variable substitution: ${VAR} or ${VAR:-default}
_ENV_VAR_PATTERN = re.compile(r"\$\{([a-zA-Z_][a-zA-Z0-9_]*)(?::-([^}]*))?\}")

ENV_PATH_VAR = "CFGSEEK_PATH"


def _expand_env_vars(value: str) -> str:
    """Expand ``${VAR}`` and ``${VAR:-default}`` patterns.

    Unset variables without a default are left untouched.

    Examples:
        >>> import os
        >>> os.environ["CFGSEEK_DOC_VAR"] = "etc"
        >>> _expand_env_vars("/${CFGSEEK_DOC_VAR}/app")
        '/etc/app'
        >>> _expand_env_vars("${CFGSEEK_DOC_MISSING:-fallback}")
        'fallback'
    """

    def replacer(match: re.Match[str]) -> str:
        env_value = os.environ.get(match.group(1))
        if env_value is not None:
            return env_value
        if match.group(2) is not None:
            return match.group(2)
        return match.group(0)

    return _ENV_VAR_PATTERN.sub(replacer, value)


def expand_path(value: str | Path) -> Path:
    """Expand environment variables and a leading ``~`` in a path.

    Args:
        value: Raw path, e.g. ``"~/.config/app"`` or ``"${XDG_CONFIG_HOME:-~/.config}/app"``.

    Returns:
        The expanded path. It is not resolved against the current directory.

    Examples:
        >>> expand_path("/etc/app")
        PosixPath('/etc/app')
    """
    return Path(os.path.expanduser(_expand_env_vars(str(value))))


def standard_directories(app_name: str) -> list[Path]:
    """Return the conventional search directories for an application.

    Highest priority first: current working directory, ``~/.config/<app_name>``,
    then the home directory.

    Args:
        app_name: Application name used for the ``~/.config`` subdirectory.
    """
    home = Path.home()
    return [Path.cwd(), home / ".config" / app_name, home]


def directories_from_env(var_name: str = ENV_PATH_VAR) -> list[Path]:
    """Read a search directory list from an environment variable.

    Entries are separated by ``os.pathsep`` and expanded with :func:`expand_path`.
    Empty entries are ignored.

    Args:
        var_name: Environment variable to read.

    Returns:
        Directories in the order listed, or an empty list if the variable
        is unset or empty.
    """
    raw = os.environ.get(var_name, "")
    return [expand_path(part) for part in raw.split(os.pathsep) if part.strip()]


__all__ = [
    "ENV_PATH_VAR",
    "directories_from_env",
    "expand_path",
    "standard_directories",
]
