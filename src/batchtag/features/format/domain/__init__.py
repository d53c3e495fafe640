"""
Summary: Pure format-string types, compiler, and filename sanitizer.
Why: Keep token handling free of I/O so matcher and renderer stay testable.
"""

from .compiler import compile_format
from .sanitizer import Sanitizer
from .tokens import (
    PLACEHOLDER_MARKER,
    FormatToken,
    LiteralToken,
    PlaceholderToken,
    placeholder_fields,
)

__all__ = [
    "compile_format",
    "Sanitizer",
    "PLACEHOLDER_MARKER",
    "FormatToken",
    "LiteralToken",
    "PlaceholderToken",
    "placeholder_fields",
]
