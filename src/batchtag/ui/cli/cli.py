"""Command line interface for batchtag."""

import sys
from typing import final

from batchtag.platform.logging import logger
from batchtag.ui.cli.args import ArgumentParser
from batchtag.ui.cli.args.options import (
    CLIArgs,
    ConvertArgs,
    EditArgs,
    RemoveArgs,
    SearchArgs,
    ShowArgs,
)
from batchtag.ui.cli.commands import (
    CommandExecutor,
    ConvertCommand,
    EditCommand,
    RemoveCommand,
    SearchCommand,
    ShowCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Return the executor for the parsed subcommand."""

        if isinstance(args, ShowArgs):
            return ShowCommand(args)
        if isinstance(args, EditArgs):
            return EditCommand(args)
        if isinstance(args, RemoveArgs):
            return RemoveCommand(args)
        if isinstance(args, ConvertArgs):
            return ConvertCommand(args)
        assert isinstance(args, SearchArgs)
        return SearchCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command = CommandProcessor.build_command(args)
            results = command.execute()
            if command.has_failures(results):
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Underlying command processing
        calls ``sys.exit(...)`` on failures, so this return is only reached
        when every record succeeded.
    """
    CommandProcessor.process_command()
    return 0
