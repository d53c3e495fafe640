"""Tests for CLI command executors."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from pytest_mock import MockerFixture

from batchtag.application.services import BatchTagService, FolderSession
from batchtag.config.config import Config
from batchtag.ui.cli.args.options import ConvertArgs, EditArgs, RemoveArgs, SearchArgs, ShowArgs
from batchtag.ui.cli.commands import (
    ConvertCommand,
    EditCommand,
    RemoveCommand,
    SearchCommand,
    ShowCommand,
)

if TYPE_CHECKING:
    from conftest import FakeRenamer, FakeTagIO, RecordFactory


@pytest.fixture
def app(tag_io: FakeTagIO, renamer: FakeRenamer) -> BatchTagService:
    return BatchTagService(tag_io_factory=lambda: tag_io, renamer_factory=lambda: renamer)


@pytest.fixture
def session(tag_io: FakeTagIO, mocker: MockerFixture) -> FolderSession:
    config = Config(include_subfolders=False, remember_last_opened_folder=False)
    _ = mocker.patch.object(config, "save")
    return FolderSession(config=config, tag_io_factory=lambda: tag_io)


@pytest.fixture
def files(make_record: RecordFactory, tag_io: FakeTagIO) -> list[Path]:
    records = [
        tag_io.add(make_record("music/Daft Punk- One More Time.mp3", album="Discovery")),
        tag_io.add(make_record("music/Air- Sexy Boy.mp3", album="Moon Safari")),
    ]
    return [record.path for record in records]


def _common(paths: list[Path]) -> dict[str, object]:
    return {"paths": paths, "recursive": None, "verbose": False, "quiet": True}


def test_edit_command_saves_fields(
    app: BatchTagService, session: FolderSession, files: list[Path], tag_io: FakeTagIO
) -> None:
    args = EditArgs(command="edit", edits={"genre": "House", "year": "2001"}, **_common(files))  # pyright: ignore[reportArgumentType]
    command = EditCommand(args, app=app, session=session)

    results = command.execute()

    assert not command.has_failures(results)
    assert [tag_io.stored[path].genre for path in files] == ["House", "House"]
    assert [tag_io.stored[path].album for path in files] == ["Discovery", "Moon Safari"]
    assert tag_io.stored[files[0]].year == 2001


def test_edit_command_reports_bad_number(
    app: BatchTagService, session: FolderSession, files: list[Path]
) -> None:
    args = EditArgs(command="edit", edits={"track": "x"}, **_common(files))  # pyright: ignore[reportArgumentType]
    command = EditCommand(args, app=app, session=session)

    results = command.execute()

    assert command.has_failures(results)
    assert results[0].failed == 2


def test_edit_filename_needs_single_file(
    app: BatchTagService, session: FolderSession, files: list[Path], renamer: FakeRenamer
) -> None:
    args = EditArgs(command="edit", filename="new", **_common(files))  # pyright: ignore[reportArgumentType]
    command = EditCommand(args, app=app, session=session)

    results = command.execute()

    assert results == []
    assert command.failed
    assert renamer.calls == []


def test_edit_filename_renames_single_file(
    app: BatchTagService, session: FolderSession, files: list[Path]
) -> None:
    args = EditArgs(command="edit", filename="renamed", **_common(files[:1]))  # pyright: ignore[reportArgumentType]
    command = EditCommand(args, app=app, session=session)

    results = command.execute()

    assert not command.has_failures(results)
    assert files[0].with_name("renamed.mp3").exists()


def test_convert_command_reads_folder(
    app: BatchTagService,
    session: FolderSession,
    files: list[Path],
    tag_io: FakeTagIO,
) -> None:
    folder = files[0].parent
    args = ConvertArgs(command="ftt", format_string="%artist%- %title%", **_common([folder]))  # pyright: ignore[reportArgumentType]
    command = ConvertCommand(args, app=app, session=session)

    results = command.execute()

    assert results[0].succeeded == 2
    assert tag_io.stored[files[1]].title == "Sexy Boy"
    assert session.is_open


def test_ttf_command_renames(
    app: BatchTagService, session: FolderSession, files: list[Path], tag_io: FakeTagIO
) -> None:
    tag_io.stored[files[1]].title = "Kelly Watch the Stars"
    args = ConvertArgs(command="ttf", format_string="%title%", **_common(files[1:]))  # pyright: ignore[reportArgumentType]
    command = ConvertCommand(args, app=app, session=session)

    results = command.execute()

    assert results[0].succeeded == 1
    assert files[1].with_name("Kelly Watch the Stars.mp3").exists()


def test_remove_command_flags_unreadable_files(
    app: BatchTagService,
    session: FolderSession,
    files: list[Path],
    tag_io: FakeTagIO,
) -> None:
    tag_io.fail_read.add(files[0])
    args = RemoveArgs(command="remove", **_common(files))  # pyright: ignore[reportArgumentType]
    command = RemoveCommand(args, app=app, session=session)

    results = command.execute()

    assert command.failed
    assert results[0].succeeded == 1
    assert tag_io.removed == [files[1]]


def test_search_command_rejects_malformed_query(
    app: BatchTagService, session: FolderSession, files: list[Path]
) -> None:
    args = SearchArgs(command="search", query="!artist=Air", **_common(files))  # pyright: ignore[reportArgumentType]
    command = SearchCommand(args, app=app, session=session)

    assert command.execute() == []
    assert command.failed


def test_show_without_paths_needs_remembered_folder(
    app: BatchTagService, session: FolderSession
) -> None:
    args = ShowArgs(command="show", **_common([]))  # pyright: ignore[reportArgumentType]
    command = ShowCommand(args, app=app, session=session)

    assert command.execute() == []
    assert command.has_failures([])
