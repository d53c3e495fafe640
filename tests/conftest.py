"""Shared pytest fixtures and in-memory port doubles."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable
from pathlib import Path

# Importing batchtag loads configuration and opens the log file, so point both
# at a scratch location before any test module imports the package.
_SCRATCH = Path(tempfile.mkdtemp(prefix="batchtag-tests-"))
os.environ["BATCHTAG_CONFIG_FILE"] = str(_SCRATCH / "config" / "config.toml")
os.environ["BATCHTAG_LOG_DIR"] = str(_SCRATCH / "logs")

import pytest  # noqa: E402

from batchtag.shared.errors import PathCollisionError, TagIOError  # noqa: E402
from batchtag.shared.metadata_record import FileStats, MetadataRecord  # noqa: E402


class FakeTagIO:
    """TagIOPort double that keeps written records in memory."""

    def __init__(self) -> None:
        self.stored: dict[Path, MetadataRecord] = {}
        self.written: list[Path] = []
        self.removed: list[Path] = []
        self.fail_read: set[Path] = set()
        self.fail_write: set[Path] = set()
        self.fail_remove: set[Path] = set()

    def add(self, record: MetadataRecord) -> MetadataRecord:
        self.stored[record.path] = _copy(record)
        return record

    def read_tag(self, path: Path) -> MetadataRecord:
        if path in self.fail_read or path not in self.stored:
            raise TagIOError(path, "unreadable")
        return _copy(self.stored[path])

    def write_tag(self, record: MetadataRecord) -> None:
        if record.path in self.fail_write:
            raise TagIOError(record.path, "write failed")
        self.stored[record.path] = _copy(record)
        self.written.append(record.path)

    def remove_tag(self, path: Path) -> None:
        if path in self.fail_remove:
            raise TagIOError(path, "remove failed")
        stored = self.stored.get(path)
        if stored is not None:
            stored.clear_tags()
        self.removed.append(path)


class FakeRenamer:
    """RenamePort double that renames real files and records each call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Path, Path]] = []
        self.fail: set[Path] = set()

    def rename(self, source: Path, destination: Path) -> None:
        if source in self.fail:
            raise TagIOError(source, "rename failed")
        if destination.exists():
            raise PathCollisionError(source, destination)
        _ = source.rename(destination)
        self.calls.append((source, destination))


def _copy(record: MetadataRecord) -> MetadataRecord:
    return MetadataRecord(
        path=record.path,
        title=record.title,
        artist=record.artist,
        album=record.album,
        album_artist=record.album_artist,
        composer=record.composer,
        genre=record.genre,
        comment=record.comment,
        year=record.year,
        track=record.track,
        album_art=record.album_art,
        stats=record.stats,
    )


RecordFactory = Callable[..., MetadataRecord]


@pytest.fixture
def make_record(tmp_path: Path) -> RecordFactory:
    """Create records backed by empty files under ``tmp_path``."""

    def _make(
        filename: str = "track.mp3",
        *,
        duration: int = 0,
        file_size: int = 0,
        **fields: object,
    ) -> MetadataRecord:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        return MetadataRecord(
            path=path,
            stats=FileStats(duration=duration, file_size=file_size),
            **fields,  # pyright: ignore[reportArgumentType]
        )

    return _make


@pytest.fixture
def tag_io() -> FakeTagIO:
    return FakeTagIO()


@pytest.fixture
def renamer() -> FakeRenamer:
    return FakeRenamer()
