"""Summary: Ports describing the tag, rename, and image collaborators.
Why: Keep batch use cases free of mutagen, Pillow, and filesystem specifics."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from batchtag.shared.metadata_record import MetadataRecord


@runtime_checkable
class TagIOPort(Protocol):
    """Port for reading and persisting embedded tags."""

    def read_tag(self, path: Path) -> MetadataRecord:
        """Build a record from the tag and stats of ``path``; raises TagIOError."""
        ...

    def write_tag(self, record: MetadataRecord) -> None:
        """Persist ``record``'s tag fields to ``record.path``; raises TagIOError."""
        ...

    def remove_tag(self, path: Path) -> None:
        """Delete the embedded tag from ``path``; raises TagIOError."""
        ...


@runtime_checkable
class RenamePort(Protocol):
    """Port for moving a file to a new name."""

    def rename(self, source: Path, destination: Path) -> None:
        """Move ``source`` to ``destination``.

        Raises PathCollisionError when ``destination`` exists and TagIOError
        for any other failure.
        """
        ...


@dataclass(frozen=True, slots=True)
class ImageInfo:
    """Facts about decoded album art."""

    mime_type: str
    width: int
    height: int


@runtime_checkable
class ImageDecodePort(Protocol):
    """Port for validating album art bytes."""

    def decode(self, data: bytes) -> ImageInfo:
        """Decode ``data``; raises ImageDecodeError when it is not an image."""
        ...


__all__ = ["ImageDecodePort", "ImageInfo", "RenamePort", "TagIOPort"]
