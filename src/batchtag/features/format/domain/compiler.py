"""
Summary: Compile user-authored format strings into literal and placeholder tokens.
Why: Give the matcher and renderer one unambiguous token sequence to walk.
"""

from __future__ import annotations

from batchtag.shared.errors import AmbiguousFormatError
from batchtag.shared.tag_fields import TagField

from .tokens import PLACEHOLDER_MARKER, FormatToken, LiteralToken, PlaceholderToken


def compile_format(pattern: str) -> tuple[FormatToken, ...]:
    """Parse ``pattern`` into an ordered token sequence.

    A placeholder is a recognized field name between two ``%`` markers,
    matched case-insensitively. An unknown name or an unterminated marker is
    kept as literal text starting at the opening ``%``; the closing marker of
    an unknown name may still open the next placeholder. Adjacent literal
    text is merged into one token.

    Args:
        pattern: Format string such as ``"%artist%- %title%"``.

    Returns:
        tuple[FormatToken, ...]: Tokens in pattern order.

    Raises:
        AmbiguousFormatError: If two placeholders have no literal between them.
    """
    tokens: list[FormatToken] = []
    literal: list[str] = []

    def flush_literal() -> None:
        if literal:
            tokens.append(LiteralToken("".join(literal)))
            literal.clear()

    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char != PLACEHOLDER_MARKER:
            literal.append(char)
            index += 1
            continue

        closing = pattern.find(PLACEHOLDER_MARKER, index + 1)
        if closing == -1:
            literal.append(pattern[index:])
            break

        field = TagField.lookup(pattern[index + 1 : closing])
        if field is None:
            literal.append(char)
            index += 1
            continue

        flush_literal()
        if tokens and isinstance(tokens[-1], PlaceholderToken):
            raise AmbiguousFormatError(pattern, tokens[-1].field.value, field.value)
        tokens.append(PlaceholderToken(field))
        index = closing + 1

    flush_literal()
    return tuple(tokens)


__all__ = ["compile_format"]
