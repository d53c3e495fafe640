"""Batch application of an edit surface.

Where: features/selection/usecases/applier.py
What: Copy every non-KEEP surface value onto each record, then persist it.
Why: Keep field-level failures local to one record and one field.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from batchtag.features.format.usecases.relocate import relocate_record
from batchtag.features.library.usecases.ports import RenamePort, TagIOPort
from batchtag.platform.logging import logger
from batchtag.shared.batch_types import (
    BatchEvent,
    BatchOperation,
    BatchResult,
    FieldError,
    ProgressCallback,
    RecordResult,
    finish_batch,
    log_batch_event,
    record_failure,
    record_success,
    skip_batch,
    start_batch,
)
from batchtag.shared.errors import BatchTagError, TagIOError
from batchtag.shared.metadata_record import MetadataRecord
from batchtag.shared.numbers import coerce_count

from ..domain.edit_surface import EditSurface, is_kept


def _filename_edit(surface: EditSurface, records: Sequence[MetadataRecord]) -> str | None:
    """Return the new filename to apply, or None when no rename is due."""

    value = surface.filename
    if is_kept(value):
        return None
    if not surface.filename_editable or len(records) != 1:
        logger.warning(
            "Ignoring filename edit %r: it applies to exactly one record, got %d",
            value,
            len(records),
        )
        return None
    if value == records[0].filename:
        return None
    return str(value)


def _apply_fields(surface: EditSurface, record: MetadataRecord, result: RecordResult) -> None:
    for field in surface.edited_fields():
        value = surface.value_of(field)
        try:
            if field.is_numeric:
                value = coerce_count(field.value, value)
            setattr(record, field.attribute, value)
        except BatchTagError as exc:
            result.field_errors.append(FieldError(field.value, exc))
            continue
        result.updates[field.value] = value

    if not is_kept(surface.album_art):
        record.album_art = surface.album_art
        result.updates["album_art"] = surface.album_art


def _log_field_errors(result: RecordResult, *, sequence: int, total: int) -> None:
    for item in result.field_errors:
        log_batch_event(
            logging.WARNING,
            BatchEvent.RECORD_FIELD_ERROR,
            "%s",
            item.message,
            sequence=sequence,
            total_files=total,
            source_path=result.source_path,
        )


def apply_surface(
    surface: EditSurface,
    records: Sequence[MetadataRecord],
    *,
    tag_io: TagIOPort,
    renamer: RenamePort | None = None,
    progress_callback: ProgressCallback | None = None,
    operation: BatchOperation = BatchOperation.SAVE_TAGS,
) -> BatchResult:
    """Apply ``surface`` to ``records`` and persist each record.

    ``KEEP`` slots leave every record's value alone. A numeric slot that does
    not parse becomes a field error for each record while the other fields
    still apply. A filename edit renames the single targeted record after its
    tags are written. A record succeeds when it persisted with no field errors.
    A filename edit with no ``renamer`` skips the whole batch before any
    record is touched.

    Args:
        surface: Edited surface, usually from ``aggregate_selection``.
        records: Selection the surface was built from.
        tag_io: Port used to persist each record.
        renamer: Port used for a filename edit; required only when one is due.
        progress_callback: Optional ``(sequence, total, path)`` hook.
        operation: Operation name used for the summary and logs.

    Returns:
        BatchResult: One entry per record in selection order, or a skipped
        result when a filename edit is due without a ``renamer``.
    """
    total = len(records)
    new_filename = _filename_edit(surface, records)
    if new_filename is not None and renamer is None:
        missing = TagIOError(records[0].path, "no rename port to apply the filename edit")
        return skip_batch(operation, missing, total)

    context = start_batch(operation, total)
    batch = BatchResult(operation=operation)
    for sequence, record in enumerate(records, start=1):
        if progress_callback is not None:
            progress_callback(sequence, total, record.path)
        result = RecordResult(source_path=record.path, target_path=record.path)
        batch.results.append(result)

        _apply_fields(surface, record, result)
        try:
            tag_io.write_tag(record)
        except BatchTagError as exc:
            _ = record_failure(result, exc, sequence=sequence, total=total)
            _log_field_errors(result, sequence=sequence, total=total)
            continue

        if new_filename is not None and renamer is not None:
            try:
                result.target_path = relocate_record(record, new_filename, renamer)
                result.updates["filename"] = record.filename
            except BatchTagError as exc:
                result.field_errors.append(FieldError("filename", exc))

        if result.field_errors:
            result.success = False
            _log_field_errors(result, sequence=sequence, total=total)
            continue
        _ = record_success(result, sequence=sequence, total=total)
    return finish_batch(context, batch)


__all__ = ["apply_surface"]
