"""Human-readable renderings of durations and byte sizes."""

from __future__ import annotations

_SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")


def duration_to_string(seconds: int) -> str:
    """Render ``seconds`` as ``HH:MM:SS``.

    Hours are not wrapped at 24, so long selections stay readable.
    """
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def file_size_to_string(size: int) -> str:
    """Render a byte count with a 1024-based unit and up to two decimals."""
    value = float(max(0, size))
    unit_index = 0
    while value >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1
    rendered = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {_SIZE_UNITS[unit_index]}"


__all__ = ["duration_to_string", "file_size_to_string"]
