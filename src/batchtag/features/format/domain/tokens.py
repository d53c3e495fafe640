"""Format string token types."""

from __future__ import annotations

from dataclasses import dataclass

from batchtag.shared.tag_fields import TagField

PLACEHOLDER_MARKER = "%"


@dataclass(frozen=True, slots=True)
class LiteralToken:
    """Text that must appear verbatim in a filename."""

    text: str


@dataclass(frozen=True, slots=True)
class PlaceholderToken:
    """A ``%field%`` capture slot."""

    field: TagField

    def __str__(self) -> str:
        return f"{PLACEHOLDER_MARKER}{self.field.value}{PLACEHOLDER_MARKER}"


FormatToken = LiteralToken | PlaceholderToken


def placeholder_fields(tokens: tuple[FormatToken, ...]) -> tuple[TagField, ...]:
    """Return the fields referenced by ``tokens`` in order."""
    return tuple(token.field for token in tokens if isinstance(token, PlaceholderToken))


__all__ = [
    "PLACEHOLDER_MARKER",
    "FormatToken",
    "LiteralToken",
    "PlaceholderToken",
    "placeholder_fields",
]
