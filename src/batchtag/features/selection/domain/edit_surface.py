"""
Summary: Editable view of a selection with a typed keep sentinel per field.
Why: Distinguish "leave each record alone" from any value a user could type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal

from batchtag.shared.formatting import duration_to_string, file_size_to_string
from batchtag.shared.tag_fields import TAG_FIELDS, TagField


class Keep(Enum):
    """Single-member enum marking a field the edit must leave untouched."""

    KEEP = "keep"

    def __repr__(self) -> str:
        return "<keep>"

    def __str__(self) -> str:
        return "<keep>"


KEEP: Final = Keep.KEEP

KeepType = Literal[Keep.KEEP]

# Surface attributes in display order.
SURFACE_FIELDS: tuple[str, ...] = (
    "filename",
    *(field.attribute for field in TAG_FIELDS),
    "album_art",
)


def is_kept(value: object) -> bool:
    """Return True when ``value`` is the keep sentinel."""
    return value is KEEP


@dataclass
class EditSurface:
    """Per-field common values of a selection, or ``KEEP`` where records differ.

    Numeric slots hold ``int | None`` when aggregated and may hold user text,
    which is parsed when the surface is applied.
    """

    filename: str | KeepType = KEEP
    filename_editable: bool = False
    title: str | KeepType = KEEP
    artist: str | KeepType = KEEP
    album: str | KeepType = KEEP
    year: int | str | None | KeepType = KEEP
    track: int | str | None | KeepType = KEEP
    album_artist: str | KeepType = KEEP
    composer: str | KeepType = KEEP
    genre: str | KeepType = KEEP
    comment: str | KeepType = KEEP
    album_art: bytes | None | KeepType = KEEP
    total_duration: int = 0
    total_file_size: int = 0
    record_count: int = 0

    @classmethod
    def keep_all(cls) -> "EditSurface":
        """Return a surface that leaves every field of every record untouched."""
        return cls()

    def value_of(self, field: TagField) -> object:
        """Return the slot for ``field``."""
        return getattr(self, field.attribute)

    def edited_fields(self) -> tuple[TagField, ...]:
        """Return the tag fields holding a concrete value, in display order."""
        return tuple(field for field in TAG_FIELDS if not is_kept(self.value_of(field)))

    def display_value(self, name: str) -> str:
        """Render a slot for display; kept slots render as ``<keep>``."""
        value = getattr(self, name)
        if is_kept(value):
            return str(KEEP)
        if value is None:
            return ""
        if isinstance(value, bytes):
            return f"<{file_size_to_string(len(value))} image>"
        return str(value)

    @property
    def duration_text(self) -> str:
        return duration_to_string(self.total_duration)

    @property
    def file_size_text(self) -> str:
        return file_size_to_string(self.total_file_size)


__all__ = [
    "KEEP",
    "EditSurface",
    "Keep",
    "KeepType",
    "SURFACE_FIELDS",
    "is_kept",
]
