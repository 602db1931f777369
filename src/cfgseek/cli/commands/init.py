"""Materialize a default config file if none exists yet."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from cfgseek.cli.common import DIR_OPTION, FILENAME_ARGUMENT, FORMAT_OPTION, console, exit_error, search_directories
from cfgseek.codec import ConfigCodec
from cfgseek.exceptions import ConfigError, DecodeError
from cfgseek.formats import format_for_path
from cfgseek.request import ConfigFile


def init(
    filename: FILENAME_ARGUMENT,
    default_file: Annotated[
        Path,
        typer.Option("--default-file", "-D", help="File holding the default config (json or yaml)."),
    ],
    dirs: DIR_OPTION = None,
    fmt: FORMAT_OPTION = None,
) -> None:
    """Create the config file from a default unless one is already found.

    The file is written to the first search directory.

    Examples:
        cfgseek init settings.json -d ~/.config/myapp -d /etc/myapp --default-file defaults.yml
    """
    try:
        raw = default_file.read_bytes()
    except OSError as exc:
        exit_error(f"Cannot read default file {default_file}: {exc}")

    try:
        default = ConfigCodec(format_for_path(default_file), dict).decode(raw)
    except DecodeError as exc:
        exit_error(f"Invalid default file {default_file}: {exc}")

    request = ConfigFile(filename).directories(*search_directories(dirs)).default(default)
    try:
        if fmt is not None:
            request.format(fmt)
        loaded = request.create_file_if_not_found().read()
    except (ConfigError, ValueError) as exc:
        exit_error(str(exc))

    if loaded.created:
        console.print(f"[green]Created[/] {escape(str(loaded.path))}", highlight=False, soft_wrap=True)
    else:
        console.print(f"[yellow]Already exists[/] {escape(str(loaded.path))}", highlight=False, soft_wrap=True)


__all__ = ["init"]
