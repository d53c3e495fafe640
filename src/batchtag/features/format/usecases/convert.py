"""
Summary: Batch filename-to-tag and tag-to-filename conversions over a selection.
Why: Isolate per-record failures so one bad filename never stops the batch.
"""

from __future__ import annotations

from collections.abc import Sequence

from batchtag.features.library.usecases.ports import RenamePort, TagIOPort
from batchtag.shared.batch_types import (
    BatchOperation,
    BatchResult,
    ProgressCallback,
    RecordResult,
    finish_batch,
    record_failure,
    record_success,
    skip_batch,
    start_batch,
)
from batchtag.shared.errors import BatchTagError
from batchtag.shared.metadata_record import MetadataRecord

from ..domain.compiler import compile_format
from ..domain.sanitizer import Sanitizer
from ..domain.tokens import FormatToken
from .matcher import filename_to_tag
from .renderer import tag_to_filename


def _compile_or_skip(
    pattern: str,
    operation: BatchOperation,
    total: int,
) -> tuple[FormatToken, ...] | BatchResult:
    try:
        return compile_format(pattern)
    except BatchTagError as exc:
        return skip_batch(operation, exc, total)


def convert_filenames_to_tags(
    pattern: str,
    records: Sequence[MetadataRecord],
    *,
    tag_io: TagIOPort,
    progress_callback: ProgressCallback | None = None,
) -> BatchResult:
    """Fill tags from each record's filename and persist the updated records.

    Args:
        pattern: Format string describing the filenames.
        records: Selection in the order it should be processed.
        tag_io: Port used to persist each updated record.
        progress_callback: Optional ``(sequence, total, path)`` hook.

    Returns:
        BatchResult: One entry per record, or a skipped result when ``pattern``
        does not compile.
    """
    total = len(records)
    compiled = _compile_or_skip(pattern, BatchOperation.FILENAME_TO_TAG, total)
    if isinstance(compiled, BatchResult):
        return compiled

    context = start_batch(BatchOperation.FILENAME_TO_TAG, total)
    batch = BatchResult(operation=BatchOperation.FILENAME_TO_TAG)
    for sequence, record in enumerate(records, start=1):
        if progress_callback is not None:
            progress_callback(sequence, total, record.path)
        result = RecordResult(source_path=record.path, target_path=record.path)
        batch.results.append(result)
        try:
            updates = filename_to_tag(compiled, record)
            result.updates = {field.value: value for field, value in updates.items()}
            tag_io.write_tag(record)
        except BatchTagError as exc:
            _ = record_failure(result, exc, sequence=sequence, total=total)
            continue
        _ = record_success(result, sequence=sequence, total=total)
    return finish_batch(context, batch)


def convert_tags_to_filenames(
    pattern: str,
    records: Sequence[MetadataRecord],
    *,
    renamer: RenamePort,
    substitute: str | None = None,
    progress_callback: ProgressCallback | None = None,
) -> BatchResult:
    """Rename each record's file to the name rendered from its tags.

    Records whose rendered name is unusable or already taken keep their
    current path and are reported as failed. An illegal ``substitute`` skips
    the whole batch, like a pattern that does not compile.
    """
    total = len(records)
    try:
        replacement = Sanitizer.resolve_substitute(substitute)
    except BatchTagError as exc:
        return skip_batch(BatchOperation.TAG_TO_FILENAME, exc, total)
    compiled = _compile_or_skip(pattern, BatchOperation.TAG_TO_FILENAME, total)
    if isinstance(compiled, BatchResult):
        return compiled

    context = start_batch(BatchOperation.TAG_TO_FILENAME, total)
    batch = BatchResult(operation=BatchOperation.TAG_TO_FILENAME)
    for sequence, record in enumerate(records, start=1):
        if progress_callback is not None:
            progress_callback(sequence, total, record.path)
        result = RecordResult(source_path=record.path)
        batch.results.append(result)
        try:
            result.target_path = tag_to_filename(
                compiled,
                record,
                renamer,
                substitute=replacement,
            )
        except BatchTagError as exc:
            _ = record_failure(result, exc, sequence=sequence, total=total)
            continue
        result.updates = {"filename": result.target_path.name}
        _ = record_success(result, sequence=sequence, total=total)
    return finish_batch(context, batch)


__all__ = ["convert_filenames_to_tags", "convert_tags_to_filenames"]
