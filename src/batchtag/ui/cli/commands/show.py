"""src/batchtag/ui/cli/commands/show.py
What: List the selected files and the tag values they share.
Why: Preview what a batch edit would keep before running it.
"""


from typing_extensions import override

from batchtag.shared.batch_types import BatchResult
from batchtag.ui.cli.commands.executor import CommandExecutor


class ShowCommand(CommandExecutor):
    """Command for displaying a selection."""

    @override
    def execute(self) -> list[BatchResult]:
        records = self.load_records()
        if not records:
            return []
        self.record_display.show_records(records)
        self.record_display.show_surface(self.app.selection_surface(records))
        return []
