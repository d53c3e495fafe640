"""Progress display functionality for CLI."""

from collections.abc import Callable
from pathlib import Path
from typing import Any, final

from rich.console import Console
from rich.progress import Progress, TaskID

from batchtag.platform.logging import PathRichHandler, logger
from batchtag.shared.batch_types import BatchResult, ProgressCallback


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run(
        self,
        description: str,
        operation: Callable[[ProgressCallback], BatchResult],
    ) -> BatchResult:
        """Run a batch operation while rendering a transient progress bar.

        Args:
            description: Label shown next to the bar.
            operation: Callable receiving the progress callback to report through.

        Returns:
            BatchResult: Whatever ``operation`` returned.
        """
        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, PathRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(**progress_kwargs) as progress:
            task_id: TaskID | None = None

            def _cb(sequence: int, total: int, current_file: Path) -> None:
                nonlocal task_id
                _ = current_file  # consumed via logging elsewhere
                if task_id is None:
                    task_id = progress.add_task(f"[cyan]{description}...", total=total)
                progress.update(
                    task_id,
                    completed=sequence,
                    description=f"[cyan]{description}... {sequence}/{total}",
                )

            return operation(_cb)


__all__ = ["ProgressDisplay"]
