"""Typer application entry point for ``cfgseek``."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from cfgseek import meta
from cfgseek.cli.commands import init, locate, show
from cfgseek.cli.common import console

app = typer.Typer(
    name=meta.__app_name__,
    help=f"{meta.__app_name__}: {meta.__description__}",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{meta.__app_name__} {meta.__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log search and load decisions."),
    ] = False,
) -> None:
    """Find, load and materialize configuration files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


app.command("locate")(locate)
app.command("show")(show)
app.command("init")(init)


def main() -> None:
    """Run the CLI."""
    app()


__all__ = ["app", "main"]
