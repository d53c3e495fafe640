"""Application service for batch tag edits.

This layer constructs the tag, rename, and image adapters once so that
multiple UIs (CLI, GUI) can run the same batch use cases over a selection.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import final

from batchtag.config.settings import (
    FILENAME_TO_TAG_FORMAT,
    ILLEGAL_CHARACTER_SUBSTITUTE,
    TAG_TO_FILENAME_FORMAT,
)
from batchtag.features.format import convert_filenames_to_tags, convert_tags_to_filenames
from batchtag.features.library import remove_tags
from batchtag.features.library.adapters import (
    LocalRenameAdapter,
    MutagenTagAdapter,
    PillowImageDecoder,
)
from batchtag.features.library.usecases.ports import ImageDecodePort, RenamePort, TagIOPort
from batchtag.features.selection import EditSurface, aggregate_selection, apply_surface
from batchtag.platform.logging import logger
from batchtag.shared.batch_types import (
    BatchOperation,
    BatchResult,
    ProgressCallback,
    skip_batch,
)
from batchtag.shared.errors import ImageDecodeError, TagIOError
from batchtag.shared.metadata_record import MetadataRecord


@final
class BatchTagService:
    """Application service that runs batch commands over a selection.

    Each command returns a ``BatchResult``; per-record failures never raise.
    """

    def __init__(
        self,
        *,
        tag_io_factory: Callable[[], TagIOPort] | None = None,
        renamer_factory: Callable[[], RenamePort] | None = None,
        image_decoder_factory: Callable[[], ImageDecodePort] | None = None,
        substitute: str = ILLEGAL_CHARACTER_SUBSTITUTE,
    ) -> None:
        """Create a service with overridable adapter factories.

        Tests can inject light-weight doubles while production code relies on
        the mutagen, filesystem, and Pillow adapters.
        """

        self.tag_io: TagIOPort = (tag_io_factory or MutagenTagAdapter)()
        self.renamer: RenamePort = (renamer_factory or LocalRenameAdapter)()
        self.image_decoder: ImageDecodePort = (image_decoder_factory or PillowImageDecoder)()
        self.substitute: str = substitute

    def selection_surface(self, records: Sequence[MetadataRecord]) -> EditSurface:
        """Return the edit surface for ``records`` (raises ValueError when empty)."""
        return aggregate_selection(records)

    def save_tags(
        self,
        surface: EditSurface,
        records: Sequence[MetadataRecord],
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> BatchResult:
        """Apply ``surface`` to ``records`` and write every record."""
        return apply_surface(
            surface,
            records,
            tag_io=self.tag_io,
            renamer=self.renamer,
            progress_callback=progress_callback,
        )

    def remove_tags(
        self,
        records: Sequence[MetadataRecord],
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> BatchResult:
        """Strip the embedded tag from every record's file."""
        return remove_tags(records, tag_io=self.tag_io, progress_callback=progress_callback)

    def insert_album_art(
        self,
        image_path: Path,
        records: Sequence[MetadataRecord],
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> BatchResult:
        """Embed the image at ``image_path`` as album art in every record.

        The batch is skipped when the image cannot be read or decoded.
        """
        try:
            data = Path(image_path).read_bytes()
        except OSError as exc:
            logger.error("Failed to read album art %s: %s", image_path, exc)
            return skip_batch(
                BatchOperation.INSERT_ALBUM_ART,
                TagIOError(Path(image_path), str(exc)),
                len(records),
            )
        try:
            info = self.image_decoder.decode(data)
        except ImageDecodeError as exc:
            return skip_batch(BatchOperation.INSERT_ALBUM_ART, exc, len(records))

        logger.debug(
            "Inserting %s album art (%dx%d) from %s",
            info.mime_type,
            info.width,
            info.height,
            image_path,
        )
        surface = EditSurface.keep_all()
        surface.album_art = data
        return apply_surface(
            surface,
            records,
            tag_io=self.tag_io,
            progress_callback=progress_callback,
            operation=BatchOperation.INSERT_ALBUM_ART,
        )

    def filename_to_tag(
        self,
        records: Sequence[MetadataRecord],
        *,
        pattern: str | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> BatchResult:
        """Fill tags from filenames using ``pattern`` or the configured format."""
        return convert_filenames_to_tags(
            pattern or FILENAME_TO_TAG_FORMAT,
            records,
            tag_io=self.tag_io,
            progress_callback=progress_callback,
        )

    def tag_to_filename(
        self,
        records: Sequence[MetadataRecord],
        *,
        pattern: str | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> BatchResult:
        """Rename files from tags using ``pattern`` or the configured format."""
        return convert_tags_to_filenames(
            pattern or TAG_TO_FILENAME_FORMAT,
            records,
            renamer=self.renamer,
            substitute=self.substitute,
            progress_callback=progress_callback,
        )


__all__ = ["BatchTagService"]
