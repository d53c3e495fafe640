"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, final

from batchtag.config.config import Config
from batchtag.config.settings import FORMAT_STRINGS
from batchtag.platform.logging import configure_logging, logger
from batchtag.shared.tag_fields import TAG_FIELDS
from batchtag.ui.cli.args.options import (
    CLIArgs,
    ConvertArgs,
    EditArgs,
    RemoveArgs,
    SearchArgs,
    ShowArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="batchtag - Edit audio tags across many files at once.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        show_parser = subparsers.add_parser(
            "show",
            help="List files with their tags and the values they share",
        )
        ArgumentParser._configure_common(show_parser)

        edit_parser = subparsers.add_parser(
            "edit",
            help="Set tag fields on every selected file",
        )
        ArgumentParser._configure_common(edit_parser)
        for tag_field in TAG_FIELDS:
            option = "--" + tag_field.attribute.replace("_", "-")
            _ = edit_parser.add_argument(
                option,
                dest=tag_field.attribute,
                type=str,
                metavar="VALUE",
                help=f"New {tag_field.attribute.replace('_', ' ')} (empty string clears it)",
            )
        _ = edit_parser.add_argument(
            "--filename",
            type=str,
            help="New filename; only allowed when exactly one file is selected",
        )
        art_group = edit_parser.add_mutually_exclusive_group()
        _ = art_group.add_argument(
            "--album-art",
            type=str,
            metavar="IMAGE",
            help="Embed the image file as album art",
        )
        _ = art_group.add_argument(
            "--remove-album-art",
            action="store_true",
            help="Remove embedded album art",
        )

        remove_parser = subparsers.add_parser(
            "remove",
            help="Remove embedded tags from every selected file",
        )
        ArgumentParser._configure_common(remove_parser)

        ftt_parser = subparsers.add_parser(
            "ftt",
            help="Fill tags by parsing filenames with a format string",
        )
        ArgumentParser._configure_common(ftt_parser)
        ArgumentParser._configure_format(ftt_parser)

        ttf_parser = subparsers.add_parser(
            "ttf",
            help="Rename files from their tags with a format string",
        )
        ArgumentParser._configure_common(ttf_parser)
        ArgumentParser._configure_format(ttf_parser)

        search_parser = subparsers.add_parser(
            "search",
            help='Filter files by filename, or by tags with !prop="value";prop2="value"',
        )
        _ = search_parser.add_argument(
            "query",
            type=str,
            help="Filename text, or an advanced query starting with !",
        )
        ArgumentParser._configure_common(search_parser)

        return parser

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply the path and verbosity options shared by every subcommand."""

        _ = parser.add_argument(
            "paths",
            type=str,
            nargs="*",
            help="Audio files or folders (defaults to the last opened folder)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--recursive",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Include subfolders when scanning folders (defaults to configuration)",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show per-file processing details",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _configure_format(parser: argparse.ArgumentParser) -> None:
        parser.formatter_class = argparse.RawDescriptionHelpFormatter
        parser.epilog = "format presets:\n" + "\n".join(f"  {preset}" for preset in FORMAT_STRINGS)
        _ = parser.add_argument(
            "--format",
            dest="format_string",
            type=str,
            help="Format string such as '%%artist%%- %%title%%' (defaults to configuration)",
            metavar="FORMAT",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If a path does not exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))
        _ = configure_logging(Config.load(), quiet=is_quiet, verbose=is_verbose)

        paths = [Path(raw).expanduser().resolve() for raw in parsed_args.paths]
        missing = [path for path in paths if not path.exists()]
        if missing:
            for path in missing:
                logger.error("Path does not exist: %s", path)
            sys.exit(1)

        command: str = parsed_args.command
        common: dict[str, Any] = {
            "paths": paths,
            "recursive": parsed_args.recursive,
            "verbose": is_verbose,
            "quiet": is_quiet,
        }

        if command == "show":
            return ShowArgs(command="show", **common)

        if command == "edit":
            return ArgumentParser._process_edit(parsed_args, common)

        if command == "remove":
            return RemoveArgs(command="remove", **common)

        if command in {"ftt", "ttf"}:
            return ConvertArgs(
                command=command,
                format_string=parsed_args.format_string,
                **common,
            )

        if command == "search":
            return SearchArgs(command="search", query=parsed_args.query, **common)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_edit(parsed_args: argparse.Namespace, common: dict[str, Any]) -> EditArgs:
        """Collect the tag options that were actually given."""

        edits = {
            tag_field.attribute: value
            for tag_field in TAG_FIELDS
            if (value := getattr(parsed_args, tag_field.attribute)) is not None
        }

        album_art: Path | None = None
        if parsed_args.album_art:
            album_art = Path(parsed_args.album_art).expanduser().resolve()
            if not album_art.is_file():
                logger.error("Album art image does not exist: %s", album_art)
                sys.exit(1)

        if not edits and parsed_args.filename is None and album_art is None and not (
            parsed_args.remove_album_art
        ):
            logger.error("Nothing to edit: pass at least one field option")
            sys.exit(2)

        return EditArgs(
            command="edit",
            edits=edits,
            filename=parsed_args.filename,
            album_art=album_art,
            remove_album_art=bool(parsed_args.remove_album_art),
            **common,
        )


__all__ = ["ArgumentParser"]
