"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from batchtag.shared.batch_types import BatchResult


def render_batch_summary(console: Console, result: BatchResult, header_label: str) -> None:
    """Render a formatted summary of one batch.

    Args:
        console: Rich console instance used to render output.
        result: Outcome of the batch.
        header_label: Label rendered in the summary header.
    """
    console.print(f"\n[bold]{escape(header_label)}:[/bold]")
    if result.skipped:
        console.print(f"[yellow]{escape(result.summary())}[/yellow]")
        return

    console.print(escape(result.summary()))
    console.print(f"[green]Successful: {result.succeeded}[/green]")

    failures = [record for record in result.results if not record.success]
    if not failures:
        return

    console.print(f"[red]Failed: {len(failures)}[/red]")
    for failed in failures:
        console.print(
            f"[red]  • {escape(str(failed.source_path))}: "
            f"{escape(failed.error_message or 'unknown error')}[/red]"
        )


__all__ = ["render_batch_summary"]
