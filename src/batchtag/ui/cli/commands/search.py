"""src/batchtag/ui/cli/commands/search.py
What: Filter the selection with a plain or advanced search query.
Why: Let users find files by filename or tag values from the terminal.
"""


from typing_extensions import override

from batchtag.features.library.domain import search_records
from batchtag.platform.logging import logger
from batchtag.shared.batch_types import BatchResult
from batchtag.ui.cli.args.options import SearchArgs
from batchtag.ui.cli.commands.executor import CommandExecutor


class SearchCommand(CommandExecutor):
    """Command for searching a selection."""

    args: SearchArgs

    @override
    def execute(self) -> list[BatchResult]:
        records = self.load_records()
        result = search_records(records, self.args.query)
        if not result.valid:
            logger.error(
                'Invalid advanced search %r; expected !prop="value";prop2="value"',
                self.args.query,
            )
            self.failed = True
            return []
        self.record_display.show_records(result.matches, title="Matches", quiet=self.args.quiet)
        return []
