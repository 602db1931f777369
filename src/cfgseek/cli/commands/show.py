"""Load a config file and print its content with provenance."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.syntax import Syntax

from cfgseek.cli.common import DIR_OPTION, FILENAME_ARGUMENT, FORMAT_OPTION, console, exit_error, search_directories
from cfgseek.codec import to_data
from cfgseek.exceptions import ConfigError, EncodeError
from cfgseek.formats import get_format
from cfgseek.request import ConfigFile


def show(
    filename: FILENAME_ARGUMENT,
    dirs: DIR_OPTION = None,
    fmt: FORMAT_OPTION = None,
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Output format (json, yaml)."),
    ] = "yaml",
) -> None:
    """Load a config file from the search directories and print it.

    Examples:
        cfgseek show settings.json -d ~/.config/myapp -d /etc/myapp
        cfgseek show settings.json -d . --output json
    """
    try:
        out_format = get_format(output)
    except ValueError as exc:
        exit_error(str(exc))

    request = ConfigFile(filename).directories(*search_directories(dirs))
    try:
        if fmt is not None:
            request.format(fmt)
        loaded = request.read()
    except (ConfigError, ValueError) as exc:
        exit_error(str(exc))

    try:
        text = out_format.encode(to_data(loaded.value)).decode("utf-8")
    except EncodeError as exc:
        exit_error(f"Cannot show {filename} as {out_format.name}: {exc}")

    origin = escape(str(loaded.path))
    console.print(f"[dim]# source: {loaded.source.value} ({origin})[/]", highlight=False, soft_wrap=True)
    console.print(Syntax(text, out_format.name, theme="ansi_dark", word_wrap=True))


__all__ = ["show"]
