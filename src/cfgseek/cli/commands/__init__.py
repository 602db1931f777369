"""CLI subcommands."""

from cfgseek.cli.commands.init import init
from cfgseek.cli.commands.locate import locate
from cfgseek.cli.commands.show import show

__all__ = ["init", "locate", "show"]
