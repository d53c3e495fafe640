"""Filename to tag matching.

Where: features/format/usecases/matcher.py
What: Align a filename against compiled format tokens and capture field values.
Why: Let users fill tags from consistently named files in one batch.
"""

from __future__ import annotations

from batchtag.shared.errors import NoMatchError
from batchtag.shared.metadata_record import MetadataRecord
from batchtag.shared.numbers import parse_count
from batchtag.shared.tag_fields import TagField

from ..domain.tokens import FormatToken, PlaceholderToken

FieldUpdates = dict[TagField, str | int | None]


def match_filename(tokens: tuple[FormatToken, ...], filename: str) -> FieldUpdates:
    """Capture field values from ``filename`` using ``tokens``.

    A literal that follows a placeholder matches at its next occurrence,
    except the final literal of the pattern which must end the filename.
    A literal with no placeholder before it must sit at the current
    position. A trailing placeholder takes the rest of the filename.

    Args:
        tokens: Output of ``compile_format``.
        filename: Name to match, extension already removed.

    Returns:
        FieldUpdates: Stripped captures keyed by field. ``year``/``track``
        hold ints, or None when their capture is empty. ``%filename%``
        captures are matched but not returned.

    Raises:
        NoMatchError: If the literals do not line up with the filename.
        ParseError: If a numeric capture is not a non-negative integer.
    """
    remaining = filename
    pending: PlaceholderToken | None = None
    captures: list[tuple[TagField, str]] = []
    last_index = len(tokens) - 1

    for index, token in enumerate(tokens):
        if isinstance(token, PlaceholderToken):
            pending = token
            continue

        text = token.text
        if pending is None:
            if not remaining.startswith(text):
                offset = len(filename) - len(remaining)
                raise NoMatchError(filename, f"expected {text!r} at position {offset}")
            remaining = remaining[len(text) :]
            continue

        if index == last_index:
            if not remaining.endswith(text):
                raise NoMatchError(filename, f"expected name to end with {text!r}")
            position = len(remaining) - len(text)
        else:
            position = remaining.find(text)
            if position == -1:
                raise NoMatchError(filename, f"separator {text!r} not found")

        captures.append((pending.field, remaining[:position]))
        remaining = remaining[position + len(text) :]
        pending = None

    if pending is not None:
        captures.append((pending.field, remaining))
        remaining = ""

    if remaining:
        raise NoMatchError(filename, f"unmatched trailing text {remaining!r}")

    updates: FieldUpdates = {}
    for field, raw in captures:
        if field is TagField.FILENAME:
            continue
        value: str | int | None = raw.strip()
        if field.is_numeric:
            value = parse_count(field.value, raw)
        if field in updates and updates[field] != value:
            raise NoMatchError(
                filename,
                f"%{field.value}% captured both {updates[field]!r} and {value!r}",
            )
        updates[field] = value
    return updates


def apply_field_updates(record: MetadataRecord, updates: FieldUpdates) -> None:
    """Write ``updates`` onto ``record``."""
    for field, value in updates.items():
        setattr(record, field.attribute, value)


def filename_to_tag(tokens: tuple[FormatToken, ...], record: MetadataRecord) -> FieldUpdates:
    """Match ``record``'s filename (minus extension) and apply the captures.

    Nothing is applied when matching fails.
    """
    updates = match_filename(tokens, record.stem)
    apply_field_updates(record, updates)
    return updates


__all__ = ["FieldUpdates", "apply_field_updates", "filename_to_tag", "match_filename"]
