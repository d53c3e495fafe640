"""src/batchtag/ui/cli/commands/edit.py
What: Apply field edits, a rename, or album art to the selection.
Why: Drive the edit surface from command line options.
"""


from typing_extensions import override

from batchtag.platform.logging import logger
from batchtag.shared.batch_types import BatchResult
from batchtag.ui.cli.args.options import EditArgs
from batchtag.ui.cli.commands.executor import CommandExecutor


class EditCommand(CommandExecutor):
    """Command for editing tags across a selection."""

    args: EditArgs

    @override
    def execute(self) -> list[BatchResult]:
        records = self.load_records()
        if not records:
            return []

        if self.args.filename is not None and len(records) != 1:
            logger.error("--filename needs exactly one file, got %d", len(records))
            self.failed = True
            return []

        results: list[BatchResult] = []
        surface = self.app.selection_surface(records)
        for attribute, value in self.args.edits.items():
            setattr(surface, attribute, value)
        if self.args.filename is not None:
            surface.filename = self.args.filename
        if self.args.remove_album_art:
            surface.album_art = None

        if self.args.edits or self.args.filename is not None or self.args.remove_album_art:
            results.append(
                self.run_batch(
                    "Saving tags",
                    lambda progress: self.app.save_tags(
                        surface, records, progress_callback=progress
                    ),
                )
            )

        album_art = self.args.album_art
        if album_art is not None:
            results.append(
                self.run_batch(
                    "Inserting album art",
                    lambda progress: self.app.insert_album_art(
                        album_art, records, progress_callback=progress
                    ),
                )
            )
        return results
