"""Summary: Application service owning the currently opened music folder.
Why: Centralize folder lifecycle and remembered-folder preferences for every UI."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import final

from batchtag.config.config import Config
from batchtag.features.library import MusicFolder
from batchtag.features.library.adapters import MutagenTagAdapter
from batchtag.features.library.usecases.ports import TagIOPort
from batchtag.platform.logging import logger
from batchtag.shared.metadata_record import MetadataRecord


@final
class FolderSession:
    """Open, refresh, and close one music folder at a time."""

    def __init__(
        self,
        *,
        config: Config | None = None,
        tag_io_factory: Callable[[], TagIOPort] | None = None,
    ) -> None:
        self._config: Config = config if config is not None else Config.load()
        self._tag_io: TagIOPort = (tag_io_factory or MutagenTagAdapter)()
        self._folder: MusicFolder | None = None

    @property
    def folder(self) -> MusicFolder | None:
        return self._folder

    @property
    def is_open(self) -> bool:
        return self._folder is not None

    @property
    def records(self) -> Sequence[MetadataRecord]:
        return self._folder.records if self._folder is not None else ()

    def open(
        self,
        path: Path,
        *,
        include_subfolders: bool | None = None,
    ) -> Sequence[MetadataRecord]:
        """Close any open folder, then scan ``path``.

        ``include_subfolders`` overrides the configured preference for this folder.

        Raises:
            NotADirectoryError: If ``path`` is not a directory.
        """
        folder = MusicFolder(
            path,
            tag_io=self._tag_io,
            include_subfolders=(
                self._config.include_subfolders
                if include_subfolders is None
                else include_subfolders
            ),
        )
        records = folder.scan()
        self.close()
        self._folder = folder
        if self._config.remember_last_opened_folder:
            self._config.last_opened_folder = folder.path
            self._config.save()
        logger.info("Opened music folder %s", folder.path)
        return records

    def open_last(
        self,
        *,
        include_subfolders: bool | None = None,
    ) -> Sequence[MetadataRecord] | None:
        """Reopen the remembered folder, returning None when there is none to open."""
        last = self._config.last_opened_folder
        if not self._config.remember_last_opened_folder or last is None:
            return None
        if not Path(last).is_dir():
            logger.warning("Last opened folder %s no longer exists", last)
            return None
        return self.open(Path(last), include_subfolders=include_subfolders)

    def refresh(self) -> Sequence[MetadataRecord]:
        """Rescan the open folder, discarding unsaved in-memory edits.

        Raises:
            RuntimeError: If no folder is open.
        """
        if self._folder is None:
            raise RuntimeError("No music folder is open")
        return self._folder.reload()

    def close(self) -> None:
        if self._folder is None:
            return
        self._folder.close()
        logger.debug("Closed music folder %s", self._folder.path)
        self._folder = None

    def settings_changed(self, config: Config) -> bool:
        """Adopt ``config`` after the user edits preferences.

        Forgets the remembered folder when remembering is turned off and
        rescans the open folder when the subfolder preference changed.

        Returns:
            bool: True when the open folder was rescanned.
        """
        self._config = config
        if not config.remember_last_opened_folder and config.last_opened_folder is not None:
            config.last_opened_folder = None
            config.save()
        if self._folder is None:
            return False
        return self._folder.on_settings_changed(config)


__all__ = ["FolderSession"]
