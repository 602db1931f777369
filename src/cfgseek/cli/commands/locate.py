"""Print which directory supplies a config file."""

from __future__ import annotations

from rich.markup import escape

from cfgseek.cli.common import DIR_OPTION, FILENAME_ARGUMENT, console, exit_error, search_directories
from cfgseek.resolver import Found, resolve


def locate(filename: FILENAME_ARGUMENT, dirs: DIR_OPTION = None) -> None:
    """Print the path of the first matching config file.

    Examples:
        # Search the current directory, then ~/.config/myapp
        cfgseek locate settings.json -d . -d ~/.config/myapp
    """
    directories = search_directories(dirs)
    if not directories:
        exit_error("No search directories given. Use --dir or set $CFGSEEK_PATH.")

    resolution = resolve(directories, filename)
    if not isinstance(resolution, Found):
        searched = ", ".join(str(d) for d in directories)
        exit_error(f"'{filename}' not found in: {searched}")

    console.print(escape(str(resolution.path)), highlight=False, soft_wrap=True)


__all__ = ["locate"]
