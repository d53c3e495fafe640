"""src/batchtag/ui/cli/commands/remove.py
What: Strip embedded tags from the selection.
Why: Give users a one-step way to reset files before retagging.
"""


from typing_extensions import override

from batchtag.shared.batch_types import BatchResult
from batchtag.ui.cli.commands.executor import CommandExecutor


class RemoveCommand(CommandExecutor):
    """Command for removing tags."""

    @override
    def execute(self) -> list[BatchResult]:
        records = self.load_records()
        if not records:
            return []
        return [
            self.run_batch(
                "Removing tags",
                lambda progress: self.app.remove_tags(records, progress_callback=progress),
            )
        ]
