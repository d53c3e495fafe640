"""Tests for progress display functionality."""

from pathlib import Path

from pytest_mock import MockerFixture

from batchtag.shared.batch_types import BatchOperation, BatchResult, ProgressCallback
from batchtag.ui.cli.display.progress import ProgressDisplay


def test_run_reports_each_record(mocker: MockerFixture) -> None:
    """The callback handed to the operation drives one progress task."""
    mock_progress = mocker.patch("batchtag.ui.cli.display.progress.Progress")
    mock_progress_instance = mock_progress.return_value.__enter__.return_value
    expected = BatchResult(operation=BatchOperation.REMOVE_TAGS)

    def operation(progress: ProgressCallback) -> BatchResult:
        progress(1, 2, Path("a.mp3"))
        progress(2, 2, Path("b.mp3"))
        return expected

    result = ProgressDisplay().run("Removing tags", operation)

    assert result is expected
    mock_progress_instance.add_task.assert_called_once_with("[cyan]Removing tags...", total=2)
    assert mock_progress_instance.update.call_count == 2
    last_call = mock_progress_instance.update.call_args
    assert last_call.kwargs["completed"] == 2
    assert last_call.kwargs["description"] == "[cyan]Removing tags... 2/2"


def test_run_without_records_adds_no_task(mocker: MockerFixture) -> None:
    mock_progress = mocker.patch("batchtag.ui.cli.display.progress.Progress")
    mock_progress_instance = mock_progress.return_value.__enter__.return_value

    result = ProgressDisplay().run(
        "Saving tags",
        lambda _progress: BatchResult(operation=BatchOperation.SAVE_TAGS),
    )

    assert result.total == 0
    mock_progress_instance.add_task.assert_not_called()
