"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    paths: list[Path]
    recursive: bool | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for the ``edit`` subcommand.

    ``edits`` maps record attribute names to the raw text given on the command
    line; fields that were not passed are kept as they are.
    """

    command: Literal["edit"]
    paths: list[Path]
    recursive: bool | None
    verbose: bool
    quiet: bool
    edits: dict[str, str] = field(default_factory=dict)
    filename: str | None = None
    album_art: Path | None = None
    remove_album_art: bool = False


@final
@dataclass(slots=True)
class RemoveArgs:
    """Command line arguments for the ``remove`` subcommand."""

    command: Literal["remove"]
    paths: list[Path]
    recursive: bool | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ConvertArgs:
    """Command line arguments for the ``ftt`` and ``ttf`` subcommands."""

    command: Literal["ftt", "ttf"]
    paths: list[Path]
    recursive: bool | None
    verbose: bool
    quiet: bool
    format_string: str | None


@final
@dataclass(slots=True)
class SearchArgs:
    """Command line arguments for the ``search`` subcommand."""

    command: Literal["search"]
    paths: list[Path]
    recursive: bool | None
    verbose: bool
    quiet: bool
    query: str


CLIArgs = ShowArgs | EditArgs | RemoveArgs | ConvertArgs | SearchArgs

__all__ = ["CLIArgs", "ConvertArgs", "EditArgs", "RemoveArgs", "SearchArgs", "ShowArgs"]
