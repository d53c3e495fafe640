"""src/batchtag/ui/cli/display/result.py
What: Render user-facing summaries for batch CLI commands.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import ClassVar, final

from rich.console import Console

from batchtag.shared.batch_types import BatchOperation, BatchResult

from .summary import render_batch_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    HEADERS: ClassVar[dict[BatchOperation, str]] = {
        BatchOperation.SAVE_TAGS: "Save Tags Summary",
        BatchOperation.REMOVE_TAGS: "Remove Tags Summary",
        BatchOperation.INSERT_ALBUM_ART: "Album Art Summary",
        BatchOperation.FILENAME_TO_TAG: "Filename to Tag Summary",
        BatchOperation.TAG_TO_FILENAME: "Tag to Filename Summary",
    }

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_result(self, result: BatchResult, quiet: bool = False) -> None:
        """Display one batch result.

        Args:
            result: Outcome of the batch.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return
        render_batch_summary(self.console, result, self.HEADERS[result.operation])


__all__ = ["ResultDisplay"]
