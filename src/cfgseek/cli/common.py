"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from cfgseek.paths import ENV_PATH_VAR, directories_from_env, expand_path

console = Console()

FILENAME_ARGUMENT = Annotated[str, typer.Argument(help="Config file name to search for.")]
DIR_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--dir",
        "-d",
        help=f"Search directory, highest priority first. Repeatable. ${ENV_PATH_VAR} entries come first.",
    ),
]
FORMAT_OPTION = Annotated[
    str | None,
    typer.Option("--format", "-f", help="File format (json, yaml). Inferred from the file name by default."),
]


def exit_error(message: str) -> NoReturn:
    """Print an error message and exit with code 1."""
    console.print(f"[red]Error:[/] {escape(message)}", highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


def search_directories(dirs: list[str] | None) -> list[Path]:
    """Combine ``$CFGSEEK_PATH`` directories with ``--dir`` options, in that order."""
    return [*directories_from_env(ENV_PATH_VAR), *(expand_path(d) for d in dirs or [])]
