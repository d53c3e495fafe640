"""Rich console handler for structured batch log records.

Where: platform/logging/handlers.py
What: Render records carrying batch extras (event, sequence, paths) as compact lines.
Why: Keep per-record batch output readable without long absolute paths.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class PathRichHandler(RichHandler):
    """RichHandler that shortens paths attached to batch log records."""

    MAX_PATH_SEGMENTS: ClassVar[int] = 4
    ELLIPSIS: ClassVar[str] = "…"
    EVENT_STYLES: ClassVar[dict[str, str]] = {
        "success": "green",
        "complete": "green",
        "error": "red",
        "field_error": "red",
        "skipped": "yellow",
        "rename": "cyan",
        "scan": "cyan",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        _ = kwargs.setdefault("show_path", False)
        _ = kwargs.setdefault("markup", False)
        _ = kwargs.setdefault("rich_tracebacks", True)
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "batch_event", None)
        if event is None:
            return super().render_message(record, message)

        text = Text()
        sequence = getattr(record, "sequence", None)
        total = getattr(record, "total_files", None)
        if sequence is not None:
            counter = f"[{sequence}/{total}]" if total else f"[{sequence}]"
            _ = text.append(f"{counter} ", style="dim")

        event_name = str(event)
        _ = text.append(event_name, style=self._style_for(event_name))

        source = self._display_path(
            getattr(record, "source_path", None),
            getattr(record, "source_base_path", None),
        )
        if source:
            _ = text.append(" ")
            _ = text.append(source, style="white")

        target = self._display_path(
            getattr(record, "target_path", None),
            getattr(record, "target_base_path", None),
        )
        if target:
            _ = text.append(" -> ")
            _ = text.append(target, style="white")

        if message:
            _ = text.append("  ")
            _ = text.append(message)
        return text

    def _style_for(self, event_name: str) -> str:
        suffix = event_name.rsplit(".", 1)[-1]
        return self.EVENT_STYLES.get(suffix, "bold")

    @classmethod
    def _display_path(cls, path: object, base: object) -> str:
        """Render ``path`` relative to ``base`` or abbreviated to its tail segments."""

        if path is None:
            return ""
        raw = str(path)
        if not raw:
            return ""

        separator = "\\" if "\\" in raw and "/" not in raw else "/"

        if base is not None:
            base_raw = str(base).rstrip(separator)
            if base_raw and raw.startswith(base_raw + separator):
                return raw[len(base_raw) + 1 :]

        parts = [part for part in raw.split(separator) if part]
        if len(parts) <= cls.MAX_PATH_SEGMENTS:
            return raw
        tail = separator.join(parts[-cls.MAX_PATH_SEGMENTS :])
        return f"{cls.ELLIPSIS}{separator}{tail}"


__all__ = ["PathRichHandler"]
