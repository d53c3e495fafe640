"""Selection aggregation.

Where: features/selection/usecases/aggregator.py
What: Reduce a selection to one edit surface of common values or KEEP.
Why: Let a single form edit any number of records without clobbering differences.
"""

from __future__ import annotations

from collections.abc import Sequence

from batchtag.shared.metadata_record import MetadataRecord
from batchtag.shared.tag_fields import TAG_FIELDS

from ..domain.edit_surface import KEEP, EditSurface


def _common_value(records: Sequence[MetadataRecord], attribute: str) -> object:
    first = getattr(records[0], attribute)
    for record in records[1:]:
        if getattr(record, attribute) != first:
            return KEEP
    return first


def aggregate_selection(records: Sequence[MetadataRecord]) -> EditSurface:
    """Build the edit surface for ``records``.

    Each tag field holds the first record's value when all records agree and
    ``KEEP`` otherwise; album art compares by bytes. The filename is only
    shown and editable for a single record. Duration and size are summed.

    Raises:
        ValueError: If ``records`` is empty.
    """
    if not records:
        raise ValueError("Cannot aggregate an empty selection")

    surface = EditSurface(
        record_count=len(records),
        total_duration=sum(record.duration for record in records),
        total_file_size=sum(record.file_size for record in records),
    )
    for attribute in (*(field.attribute for field in TAG_FIELDS), "album_art"):
        setattr(surface, attribute, _common_value(records, attribute))

    if len(records) == 1:
        surface.filename = records[0].filename
        surface.filename_editable = True
    return surface


__all__ = ["aggregate_selection"]
