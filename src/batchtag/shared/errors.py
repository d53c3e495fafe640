"""
Summary: Error taxonomy shared by the format, selection, and library features.
Why: Let batch boundaries catch one base class while callers still branch on cause.
"""

from __future__ import annotations

from pathlib import Path


class BatchTagError(Exception):
    """Base class for every failure the tagging engine reports."""


class AmbiguousFormatError(BatchTagError):
    """Raised when a format string places two placeholders side by side."""

    def __init__(self, pattern: str, first_field: str, second_field: str) -> None:
        super().__init__(
            f"Format string {pattern!r} has adjacent placeholders "
            f"%{first_field}% and %{second_field}% with no separating text"
        )
        self.pattern: str = pattern
        self.first_field: str = first_field
        self.second_field: str = second_field


class NoMatchError(BatchTagError):
    """Raised when a filename does not line up with a format string."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Filename {filename!r} does not match format: {reason}")
        self.filename: str = filename
        self.reason: str = reason


class ParseError(BatchTagError, ValueError):
    """Raised when text for a numeric field is not a non-negative integer."""

    def __init__(self, field: str, text: str) -> None:
        super().__init__(f"Invalid value for {field}: {text!r} is not a non-negative integer")
        self.field: str = field
        self.text: str = text


class PathCollisionError(BatchTagError):
    """Raised when a rename destination already exists."""

    def __init__(self, source: Path, destination: Path) -> None:
        super().__init__(f"Cannot rename {source} to {destination}: destination exists")
        self.source: Path = source
        self.destination: Path = destination


class InvalidFilenameError(BatchTagError):
    """Raised when a rename target is not a usable filename."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Invalid filename: {filename!r}")
        self.filename: str = filename


class InvalidSubstituteError(BatchTagError, ValueError):
    """Raised when the illegal-character substitute is itself illegal."""

    def __init__(self, substitute: str) -> None:
        super().__init__(f"Substitute {substitute!r} is not a legal filename character")
        self.substitute: str = substitute


class TagIOError(BatchTagError, OSError):
    """Raised when reading, writing, removing, or renaming a file fails."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path: Path = path
        self.message: str = message


class ImageDecodeError(BatchTagError):
    """Raised when album art bytes cannot be decoded as an image."""


__all__ = [
    "BatchTagError",
    "AmbiguousFormatError",
    "NoMatchError",
    "ParseError",
    "PathCollisionError",
    "InvalidFilenameError",
    "InvalidSubstituteError",
    "TagIOError",
    "ImageDecodeError",
]
