"""
Summary: Batch removal of embedded tags from a selection.
Why: Reload each record after removal so memory matches what is on disk.
"""

from __future__ import annotations

from collections.abc import Sequence

from batchtag.shared.batch_types import (
    BatchOperation,
    BatchResult,
    ProgressCallback,
    RecordResult,
    finish_batch,
    record_failure,
    record_success,
    start_batch,
)
from batchtag.shared.errors import BatchTagError
from batchtag.shared.metadata_record import MetadataRecord
from batchtag.shared.tag_fields import TAG_FIELDS

from .ports import TagIOPort


def refresh_record(record: MetadataRecord, fresh: MetadataRecord) -> None:
    """Copy tag fields and file stats from ``fresh`` onto ``record`` in place."""
    for field in TAG_FIELDS:
        setattr(record, field.attribute, getattr(fresh, field.attribute))
    record.album_art = fresh.album_art
    record.stats = fresh.stats


def remove_tags(
    records: Sequence[MetadataRecord],
    *,
    tag_io: TagIOPort,
    progress_callback: ProgressCallback | None = None,
) -> BatchResult:
    """Delete the tag of every record's file, then re-read it.

    A record whose file could be stripped but not re-read has its fields
    cleared in memory and is still reported as failed.
    """
    total = len(records)
    context = start_batch(BatchOperation.REMOVE_TAGS, total)
    batch = BatchResult(operation=BatchOperation.REMOVE_TAGS)
    for sequence, record in enumerate(records, start=1):
        if progress_callback is not None:
            progress_callback(sequence, total, record.path)
        result = RecordResult(source_path=record.path, target_path=record.path)
        batch.results.append(result)
        try:
            tag_io.remove_tag(record.path)
        except BatchTagError as exc:
            _ = record_failure(result, exc, sequence=sequence, total=total)
            continue

        try:
            refresh_record(record, tag_io.read_tag(record.path))
        except BatchTagError as exc:
            record.clear_tags()
            _ = record_failure(result, exc, sequence=sequence, total=total)
            continue
        _ = record_success(result, sequence=sequence, total=total)
    return finish_batch(context, batch)


__all__ = ["refresh_record", "remove_tags"]
