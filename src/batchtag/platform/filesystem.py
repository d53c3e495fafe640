"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path


def list_files(
    directory: Path,
    *,
    extensions: Iterable[str],
    recursive: bool = False,
) -> list[Path]:
    """Return files under ``directory`` whose suffix matches ``extensions``.

    Suffix comparison is case-insensitive. Hidden entries are skipped.
    """

    if not directory.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {directory}")

    wanted = {extension.lower() for extension in extensions}
    candidates = directory.rglob("*") if recursive else directory.iterdir()
    found: list[Path] = []
    for candidate in candidates:
        relative_parts = candidate.relative_to(directory).parts
        if any(part.startswith(".") for part in relative_parts):
            continue
        if candidate.is_file() and candidate.suffix.lower() in wanted:
            found.append(candidate)
    return found


@contextmanager
def preserved_timestamps(path: Path, *, enabled: bool = True) -> Iterator[None]:
    """Restore ``path``'s access and modification times after the block runs."""

    if not enabled:
        yield
        return

    stat_result = path.stat()
    try:
        yield
    finally:
        if path.exists():
            os.utime(path, ns=(stat_result.st_atime_ns, stat_result.st_mtime_ns))


__all__ = ["list_files", "preserved_timestamps"]
