"""src/batchtag/ui/cli/commands/convert.py
What: Run filename-to-tag or tag-to-filename over the selection.
Why: Expose both format-string directions behind one command class.
"""


from typing_extensions import override

from batchtag.shared.batch_types import BatchResult
from batchtag.ui.cli.args.options import ConvertArgs
from batchtag.ui.cli.commands.executor import CommandExecutor


class ConvertCommand(CommandExecutor):
    """Command for the ``ftt`` and ``ttf`` subcommands."""

    args: ConvertArgs

    @override
    def execute(self) -> list[BatchResult]:
        records = self.load_records()
        if not records:
            return []
        pattern = self.args.format_string
        if self.args.command == "ftt":
            return [
                self.run_batch(
                    "Converting filenames to tags",
                    lambda progress: self.app.filename_to_tag(
                        records, pattern=pattern, progress_callback=progress
                    ),
                )
            ]
        return [
            self.run_batch(
                "Converting tags to filenames",
                lambda progress: self.app.tag_to_filename(
                    records, pattern=pattern, progress_callback=progress
                ),
            )
        ]
