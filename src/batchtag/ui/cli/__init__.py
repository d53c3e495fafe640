"""Command line interface package."""

from batchtag.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
