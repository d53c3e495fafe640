"""Rename a record's file within its directory.

Where: features/format/usecases/relocate.py
What: Validate a new filename, guard against collisions, and move through RenamePort.
Why: Tag-to-filename and single-record filename edits share the same rename rules.
"""

from __future__ import annotations

import logging
from pathlib import Path

from batchtag.features.library.usecases.ports import RenamePort
from batchtag.shared.batch_types import BatchEvent, log_batch_event
from batchtag.shared.errors import InvalidFilenameError, PathCollisionError
from batchtag.shared.metadata_record import MetadataRecord

from ..domain.sanitizer import Sanitizer


def _paths_point_to_same_file(first: Path, second: Path) -> bool:
    """Return True when two paths refer to the same filesystem entity."""

    try:
        return first.samefile(second)
    except OSError:
        return first.resolve() == second.resolve()


def target_filename(record: MetadataRecord, new_filename: str) -> str:
    """Return ``new_filename`` with ``record``'s extension appended when missing."""

    suffix = record.path.suffix
    if suffix and Path(new_filename).suffix.lower() != suffix.lower():
        return new_filename + suffix
    return new_filename


def relocate_record(record: MetadataRecord, new_filename: str, renamer: RenamePort) -> Path:
    """Rename ``record``'s file to ``new_filename`` in the same directory.

    The record is only updated after the rename succeeds.

    Returns:
        Path: The record's path after the call.

    Raises:
        InvalidFilenameError: If the name is empty, dot-only, or has illegal characters.
        PathCollisionError: If another file already uses the name.
        TagIOError: If the rename itself fails.
    """
    name = target_filename(record, new_filename)
    if not Sanitizer.is_usable_stem(Path(name).stem) or not Sanitizer.is_usable_stem(name):
        raise InvalidFilenameError(new_filename)

    source = record.path
    destination = source.with_name(name)
    if destination == source:
        return source

    if destination.exists() and not _paths_point_to_same_file(source, destination):
        raise PathCollisionError(source, destination)

    renamer.rename(source, destination)
    record.relocate(destination)
    log_batch_event(
        logging.INFO,
        BatchEvent.RECORD_RENAME,
        "Renamed file",
        source_path=source,
        target_path=destination,
        target_base_path=source.parent,
        source_base_path=source.parent,
    )
    return destination


__all__ = ["relocate_record", "target_filename"]
