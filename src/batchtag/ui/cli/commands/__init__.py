"""Command execution package for CLI."""

from batchtag.ui.cli.commands.convert import ConvertCommand
from batchtag.ui.cli.commands.edit import EditCommand
from batchtag.ui.cli.commands.executor import CommandExecutor
from batchtag.ui.cli.commands.remove import RemoveCommand
from batchtag.ui.cli.commands.search import SearchCommand
from batchtag.ui.cli.commands.show import ShowCommand

__all__ = [
    "CommandExecutor",
    "ConvertCommand",
    "EditCommand",
    "RemoveCommand",
    "SearchCommand",
    "ShowCommand",
]
