"""src/batchtag/ui/cli/display/records.py
What: Render loaded records and the shared edit surface as rich tables.
Why: Show users what a batch edit will keep or overwrite before they run it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from batchtag.features.selection import EditSurface
from batchtag.features.selection.domain import SURFACE_FIELDS
from batchtag.shared.formatting import duration_to_string, file_size_to_string
from batchtag.shared.metadata_record import MetadataRecord


@final
class RecordDisplay:
    """Handles record and edit surface display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_records(
        self,
        records: Sequence[MetadataRecord],
        *,
        title: str = "Files",
        quiet: bool = False,
    ) -> None:
        if quiet:
            return
        table = Table(title=f"{title} ({len(records)})")
        for column in ("Filename", "Title", "Artist", "Album", "Year", "Track", "Duration", "Size"):
            table.add_column(column, overflow="fold")
        for record in records:
            table.add_row(
                escape(record.filename),
                escape(record.title),
                escape(record.artist),
                escape(record.album),
                "" if record.year is None else str(record.year),
                "" if record.track is None else str(record.track),
                duration_to_string(record.duration),
                file_size_to_string(record.file_size),
            )
        self.console.print(table)

    def show_surface(self, surface: EditSurface, *, quiet: bool = False) -> None:
        """Render each field's shared value, with ``<keep>`` where files differ."""
        if quiet:
            return
        table = Table(title="Shared Values", show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value", overflow="fold")
        for name in SURFACE_FIELDS:
            table.add_row(name.replace("_", " ").title(), escape(surface.display_value(name)))
        table.add_row("Files", str(surface.record_count))
        table.add_row("Total Duration", surface.duration_text)
        table.add_row("Total Size", surface.file_size_text)
        self.console.print(table)


__all__ = ["RecordDisplay"]
