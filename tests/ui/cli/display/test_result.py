"""Tests for result display functionality."""

from io import StringIO
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from batchtag.features.selection import aggregate_selection
from batchtag.shared.batch_types import BatchOperation, BatchResult, RecordResult, skip_batch
from batchtag.shared.errors import NoMatchError
from batchtag.shared.metadata_record import FileStats, MetadataRecord
from batchtag.ui.cli.display.records import RecordDisplay
from batchtag.ui.cli.display.result import ResultDisplay


@pytest.fixture
def batch_result() -> BatchResult:
    """Create a batch with one success and one failure."""
    return BatchResult(
        operation=BatchOperation.FILENAME_TO_TAG,
        results=[
            RecordResult(source_path=Path("ok.mp3"), success=True),
            RecordResult(
                source_path=Path("[bad].mp3"),
                error=NoMatchError("[bad]", "separator '- ' not found"),
            ),
        ],
    )


def _console() -> Console:
    return Console(file=StringIO(), force_terminal=False, width=200)


def test_show_result(batch_result: BatchResult) -> None:
    display = ResultDisplay(console=_console())

    display.show_result(batch_result)

    output = display.console.file.getvalue()  # pyright: ignore[reportAttributeAccessIssue]
    assert "Filename to Tag Summary:" in output
    assert "Converted 1 out of 2 filenames to tags successfully." in output
    assert "Failed: 1" in output
    assert "[bad].mp3" in output


def test_show_result_quiet(batch_result: BatchResult, mocker: MockerFixture) -> None:
    mock_console = mocker.MagicMock(spec=Console)
    display = ResultDisplay(console=mock_console)

    display.show_result(batch_result, quiet=True)

    mock_console.print.assert_not_called()


def test_show_skipped_result() -> None:
    display = ResultDisplay(console=_console())
    skipped = skip_batch(
        BatchOperation.TAG_TO_FILENAME,
        NoMatchError("x", "unused"),
        total=3,
    )

    display.show_result(skipped)

    output = display.console.file.getvalue()  # pyright: ignore[reportAttributeAccessIssue]
    assert "Skipped tag to filename" in output
    assert "Successful" not in output


def test_show_records_and_surface(tmp_path: Path) -> None:
    console = _console()
    display = RecordDisplay(console=console)
    records = [
        MetadataRecord(
            path=tmp_path / "a.mp3",
            artist="Air",
            year=1998,
            stats=FileStats(duration=60, file_size=1024),
        ),
        MetadataRecord(
            path=tmp_path / "b.mp3",
            artist="Air",
            year=2001,
            stats=FileStats(duration=120, file_size=1024),
        ),
    ]

    display.show_records(records)
    display.show_surface(aggregate_selection(records))

    output = console.file.getvalue()  # pyright: ignore[reportAttributeAccessIssue]
    assert "a.mp3" in output
    assert "<keep>" in output
    assert "00:03:00" in output
    assert "2 KB" in output
