"""Tag to filename rendering.

Where: features/format/usecases/renderer.py
What: Render compiled format tokens against a record and rename the file.
Why: Keep rendering pure so it can be previewed before any rename happens.
"""

from __future__ import annotations

from pathlib import Path

from batchtag.features.library.usecases.ports import RenamePort
from batchtag.shared.errors import InvalidFilenameError
from batchtag.shared.metadata_record import MetadataRecord
from batchtag.shared.tag_fields import TagField

from ..domain.sanitizer import Sanitizer
from ..domain.tokens import FormatToken, LiteralToken
from .relocate import relocate_record


def render_field(record: MetadataRecord, field: TagField) -> str:
    """Return the text a placeholder for ``field`` renders to."""
    if field is TagField.FILENAME:
        return record.stem
    value = getattr(record, field.attribute)
    if field.is_numeric:
        return "" if value is None else str(value)
    return value


def render_filename(
    tokens: tuple[FormatToken, ...],
    record: MetadataRecord,
    *,
    substitute: str | None = None,
) -> str:
    """Render ``tokens`` for ``record`` into a sanitized name without extension.

    Missing values render as empty text, so this never fails for a record.
    """
    parts = [
        token.text if isinstance(token, LiteralToken) else render_field(record, token.field)
        for token in tokens
    ]
    return Sanitizer.sanitize_filename("".join(parts), substitute)


def tag_to_filename(
    tokens: tuple[FormatToken, ...],
    record: MetadataRecord,
    renamer: RenamePort,
    *,
    substitute: str | None = None,
) -> Path:
    """Rename ``record``'s file to the rendered name, keeping its extension.

    Raises:
        InvalidFilenameError: If the rendered name is empty or starts with a dot.
        PathCollisionError: If the rendered name is already taken.
        TagIOError: If the rename fails.
    """
    stem = render_filename(tokens, record, substitute=substitute)
    if not Sanitizer.is_usable_stem(stem):
        raise InvalidFilenameError(stem)
    return relocate_record(record, stem + record.path.suffix, renamer)


__all__ = ["render_field", "render_filename", "tag_to_filename"]
