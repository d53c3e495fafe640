"""Command line argument handling package."""

from batchtag.ui.cli.args.parser import ArgumentParser
from batchtag.ui.cli.args.options import (
    CLIArgs,
    ConvertArgs,
    EditArgs,
    RemoveArgs,
    SearchArgs,
    ShowArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "ConvertArgs",
    "EditArgs",
    "RemoveArgs",
    "SearchArgs",
    "ShowArgs",
]
