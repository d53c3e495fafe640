# Where: batchtag.shared.metadata_record
# What: Canonical MetadataRecord dataclass shared across features.
# Why: Centralize the per-file tag representation and its storage invariants.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_TEXT_ATTRIBUTES = frozenset(
    {"title", "artist", "album", "album_artist", "composer", "genre", "comment"}
)
_NUMERIC_ATTRIBUTES = frozenset({"year", "track"})


def _validate_count(name: str, value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int or None, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class FileStats:
    """Read-only facts derived from the underlying audio file."""

    duration: int = 0
    file_size: int = 0

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")
        if self.file_size < 0:
            raise ValueError(f"file_size must be non-negative, got {self.file_size}")


@dataclass
class MetadataRecord:
    """Tag fields and file facts for one audio file.

    Text fields never hold ``None``; assigning ``None`` stores ``""``.
    ``year`` and ``track`` are non-negative ints or ``None`` (unset).
    ``filename`` is always ``path.name``; use ``relocate`` after a rename.
    """

    path: Path
    title: str = ""
    artist: str = ""
    album: str = ""
    album_artist: str = ""
    composer: str = ""
    genre: str = ""
    comment: str = ""
    year: int | None = None
    track: int | None = None
    album_art: bytes | None = None
    stats: FileStats = field(default_factory=FileStats)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _TEXT_ATTRIBUTES:
            value = "" if value is None else str(value)
        elif name in _NUMERIC_ATTRIBUTES:
            value = _validate_count(name, value)
        elif name == "path":
            value = Path(value).expanduser().absolute()
        elif name == "album_art":
            value = bytes(value) if value else None
        object.__setattr__(self, name, value)

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        """Filename without its extension."""
        return self.path.stem

    @property
    def duration(self) -> int:
        return self.stats.duration

    @property
    def file_size(self) -> int:
        return self.stats.file_size

    def relocate(self, new_path: Path) -> None:
        """Point the record at ``new_path`` after the file has been moved."""
        self.path = new_path

    def clear_tags(self) -> None:
        """Reset every tag field to its unset value, keeping path and stats."""
        for attribute in _TEXT_ATTRIBUTES:
            setattr(self, attribute, "")
        self.year = None
        self.track = None
        self.album_art = None


__all__ = ["FileStats", "MetadataRecord"]
