"""Parsing helpers for the numeric tag fields (year, track)."""

from __future__ import annotations

from batchtag.shared.errors import ParseError


def parse_count(field: str, text: str) -> int | None:
    """Parse ``text`` as a non-negative integer.

    Surrounding whitespace is ignored and empty text means "unset".

    Raises:
        ParseError: If the text holds anything but ASCII digits.
    """
    stripped = text.strip()
    if not stripped:
        return None
    if not (stripped.isascii() and stripped.isdigit()):
        raise ParseError(field, text)
    return int(stripped)


def coerce_count(field: str, value: object) -> int | None:
    """Normalize an edit value for a numeric field to ``int | None``."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ParseError(field, str(value))
    if isinstance(value, int):
        if value < 0:
            raise ParseError(field, str(value))
        return value
    if isinstance(value, str):
        return parse_count(field, value)
    raise ParseError(field, repr(value))


__all__ = ["coerce_count", "parse_count"]
