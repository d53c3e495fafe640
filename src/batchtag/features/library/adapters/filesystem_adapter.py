"""src/batchtag/features/library/adapters/filesystem_adapter.py
What: RenamePort implementation moving files on the local filesystem.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

import shutil
from pathlib import Path

from typing_extensions import override

from batchtag.platform.logging import logger
from batchtag.shared.errors import PathCollisionError, TagIOError

from ..usecases.ports import RenamePort


class LocalRenameAdapter(RenamePort):
    """Rename files in place with ``shutil.move``."""

    @override
    def rename(self, source: Path, destination: Path) -> None:
        # Case-only renames report the source itself as an existing destination.
        if destination.exists() and not _same_file(source, destination):
            raise PathCollisionError(source, destination)
        try:
            _ = shutil.move(str(source), str(destination))
        except OSError as exc:
            logger.error("Failed to rename %s to %s: %s", source, destination, exc)
            raise TagIOError(source, f"rename failed: {exc}") from exc


def _same_file(first: Path, second: Path) -> bool:
    try:
        return first.samefile(second)
    except OSError:
        return False


__all__ = ["LocalRenameAdapter"]
