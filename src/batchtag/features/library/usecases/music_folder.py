"""Music folder scanning.

Where: features/library/usecases/music_folder.py
What: Load every supported audio file under a folder into metadata records.
Why: Own the record collection that batch edits receive references into.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from batchtag.config.settings import INCLUDE_SUBFOLDERS, SUPPORTED_AUDIO_EXTENSIONS
from batchtag.platform.filesystem import list_files
from batchtag.shared.batch_types import BatchEvent, log_batch_event
from batchtag.shared.errors import BatchTagError
from batchtag.shared.metadata_record import MetadataRecord

from .ports import TagIOPort

if TYPE_CHECKING:
    from batchtag.config.config import Config


def _sort_key(record: MetadataRecord) -> tuple[str, str]:
    return (record.filename.lower(), str(record.path).lower())


class MusicFolder:
    """A folder of audio files and the records read from them.

    Records are ordered by filename, ignoring case. Files the tag port cannot
    read are skipped and logged rather than failing the scan.
    """

    def __init__(
        self,
        path: Path,
        *,
        tag_io: TagIOPort,
        include_subfolders: bool = INCLUDE_SUBFOLDERS,
        extensions: Iterable[str] = SUPPORTED_AUDIO_EXTENSIONS,
    ) -> None:
        self.path: Path = Path(path).expanduser().absolute()
        self.include_subfolders: bool = include_subfolders
        self._tag_io: TagIOPort = tag_io
        self._extensions: tuple[str, ...] = tuple(extensions)
        self._records: list[MetadataRecord] = []

    @property
    def records(self) -> Sequence[MetadataRecord]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def scan(self) -> Sequence[MetadataRecord]:
        """Read every supported file and replace the loaded records.

        Raises:
            NotADirectoryError: If the folder no longer exists.
        """
        paths = list_files(
            self.path,
            extensions=self._extensions,
            recursive=self.include_subfolders,
        )
        records: list[MetadataRecord] = []
        for path in paths:
            try:
                records.append(self._tag_io.read_tag(path))
            except BatchTagError as exc:
                log_batch_event(
                    logging.WARNING,
                    BatchEvent.FOLDER_READ_ERROR,
                    "Skipping unreadable file: %s",
                    exc,
                    source_path=path,
                    source_base_path=self.path,
                )
        records.sort(key=_sort_key)
        self._records = records
        log_batch_event(
            logging.INFO,
            BatchEvent.FOLDER_SCAN,
            "Loaded %d of %d files",
            len(records),
            len(paths),
            source_path=self.path,
            total_files=len(paths),
        )
        return self.records

    def reload(self) -> Sequence[MetadataRecord]:
        """Discard the loaded records and scan again."""
        return self.scan()

    def close(self) -> None:
        """Release every loaded record."""
        self._records.clear()

    def select(self, paths: Iterable[Path]) -> list[MetadataRecord]:
        """Return the loaded records for ``paths`` in folder order; unknown paths are ignored."""
        wanted = {Path(path).expanduser().absolute() for path in paths}
        return [record for record in self._records if record.path in wanted]

    def on_settings_changed(self, config: Config) -> bool:
        """Apply changed folder preferences, rescanning when needed.

        Returns:
            bool: True when the folder was rescanned.
        """
        include_subfolders = bool(config.include_subfolders)
        if include_subfolders == self.include_subfolders:
            return False
        self.include_subfolders = include_subfolders
        _ = self.reload()
        return True


__all__ = ["MusicFolder"]
