"""src/batchtag/shared/batch_types.py
Where: Shared kernel used by every batch use case.
What: Structured events, per-record results, and batch summaries.
Why: Surface each record's failure cause instead of a bare success counter.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from batchtag.platform.logging import logger
from batchtag.shared.errors import BatchTagError

ProgressCallback = Callable[[int, int, Path], None]
"""Called with ``(sequence, total, source_path)`` before each record is processed."""


class BatchEvent(StrEnum):
    """Structured event identifiers for batch logs."""

    BATCH_START = "batch.start"
    BATCH_COMPLETE = "batch.complete"
    BATCH_SKIPPED = "batch.skipped"
    RECORD_SUCCESS = "record.success"
    RECORD_ERROR = "record.error"
    RECORD_FIELD_ERROR = "record.field_error"
    RECORD_RENAME = "record.rename"
    FOLDER_SCAN = "folder.scan"
    FOLDER_READ_ERROR = "folder.read.error"


class BatchOperation(StrEnum):
    """Batch commands that can run over a selection."""

    SAVE_TAGS = "save_tags"
    REMOVE_TAGS = "remove_tags"
    INSERT_ALBUM_ART = "insert_album_art"
    FILENAME_TO_TAG = "filename_to_tag"
    TAG_TO_FILENAME = "tag_to_filename"


_SUMMARY_TEMPLATES: dict[BatchOperation, str] = {
    BatchOperation.SAVE_TAGS: "Saved tags for {succeeded} out of {total} files successfully.",
    BatchOperation.REMOVE_TAGS: "Removed tags from {succeeded} out of {total} files successfully.",
    BatchOperation.INSERT_ALBUM_ART: (
        "Inserted album art into {succeeded} out of {total} files successfully."
    ),
    BatchOperation.FILENAME_TO_TAG: (
        "Converted {succeeded} out of {total} filenames to tags successfully."
    ),
    BatchOperation.TAG_TO_FILENAME: (
        "Converted {succeeded} out of {total} tags to filenames successfully."
    ),
}


@dataclass(slots=True)
class FieldError:
    """A single field edit that failed while the rest of the record applied."""

    field: str
    error: BatchTagError

    @property
    def message(self) -> str:
        return f"{self.field}: {self.error}"


@dataclass
class RecordResult:
    """Outcome of one record within a batch."""

    source_path: Path
    target_path: Path | None = None
    success: bool = False
    error: BatchTagError | None = None
    field_errors: list[FieldError] = field(default_factory=list)
    updates: dict[str, Any] = field(default_factory=dict)

    @property
    def error_message(self) -> str | None:
        messages = [item.message for item in self.field_errors]
        if self.error is not None:
            messages.insert(0, str(self.error))
        return "; ".join(messages) if messages else None


@dataclass
class BatchResult:
    """Aggregate outcome of a batch; ``error`` is set when the batch was skipped."""

    operation: BatchOperation
    results: list[RecordResult] = field(default_factory=list)
    error: BatchTagError | None = None

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def skipped(self) -> bool:
        return self.error is not None

    def summary(self) -> str:
        if self.error is not None:
            return f"Skipped {self.operation.value.replace('_', ' ')}: {self.error}"
        return _SUMMARY_TEMPLATES[self.operation].format(
            succeeded=self.succeeded,
            total=self.total,
        )


@dataclass(slots=True)
class BatchLogContext:
    """Mutable bookkeeping for one batch run."""

    operation: BatchOperation
    total_files: int
    batch_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    start_time: float = field(default_factory=time.perf_counter)

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self, result: BatchResult) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "batch_id": self.batch_id,
            "operation": self.operation.value,
            "total_files": self.total_files,
            "succeeded": result.succeeded,
            "failed": result.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


def log_batch_event(
    level: int,
    event: BatchEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Emit ``message`` with ``event`` and non-empty ``context`` as record extras."""

    extra: dict[str, object] = {"batch_event": event.value}
    extra.update({key: value for key, value in context.items() if value is not None})
    logger.log(level, message, *message_args, extra=extra)


def start_batch(operation: BatchOperation, total: int) -> BatchLogContext:
    """Create the log context for a batch and emit the start event."""

    context = BatchLogContext(operation=operation, total_files=total)
    log_batch_event(
        logging.DEBUG,
        BatchEvent.BATCH_START,
        "Starting %s [id=%s, files=%d]",
        operation.value,
        context.batch_id,
        total,
        batch_id=context.batch_id,
        total_files=total,
    )
    return context


def finish_batch(context: BatchLogContext, result: BatchResult) -> BatchResult:
    """Emit the completion event for ``result`` and hand it back."""

    log_batch_event(
        logging.INFO,
        BatchEvent.BATCH_COMPLETE,
        result.summary(),
        **context.summary_extra(result),
    )
    return result


def skip_batch(operation: BatchOperation, error: BatchTagError, total: int) -> BatchResult:
    """Return a skipped result for a batch that could not start."""

    result = BatchResult(operation=operation, error=error)
    log_batch_event(
        logging.WARNING,
        BatchEvent.BATCH_SKIPPED,
        result.summary(),
        operation=operation.value,
        total_files=total,
    )
    return result


def record_failure(
    result: RecordResult,
    error: BatchTagError,
    *,
    sequence: int,
    total: int,
) -> RecordResult:
    """Mark ``result`` failed with ``error`` and log it."""

    result.success = False
    result.error = error
    log_batch_event(
        logging.WARNING,
        BatchEvent.RECORD_ERROR,
        "%s",
        error,
        sequence=sequence,
        total_files=total,
        source_path=result.source_path,
    )
    return result


def record_success(result: RecordResult, *, sequence: int, total: int) -> RecordResult:
    """Mark ``result`` successful and log it."""

    result.success = True
    log_batch_event(
        logging.DEBUG,
        BatchEvent.RECORD_SUCCESS,
        "Record processed",
        sequence=sequence,
        total_files=total,
        source_path=result.source_path,
        target_path=result.target_path,
    )
    return result


__all__ = [
    "BatchEvent",
    "BatchOperation",
    "BatchLogContext",
    "BatchResult",
    "FieldError",
    "ProgressCallback",
    "RecordResult",
    "finish_batch",
    "log_batch_event",
    "record_failure",
    "record_success",
    "skip_batch",
    "start_batch",
]
