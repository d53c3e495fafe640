"""src/batchtag/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse selection loading and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from batchtag.application.services import BatchTagService, FolderSession
from batchtag.platform.logging import logger
from batchtag.shared.batch_types import BatchResult, ProgressCallback
from batchtag.shared.errors import BatchTagError
from batchtag.shared.metadata_record import MetadataRecord
from batchtag.ui.cli.args.options import CLIArgs
from batchtag.ui.cli.display.progress import ProgressDisplay
from batchtag.ui.cli.display.records import RecordDisplay
from batchtag.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    app: BatchTagService
    session: FolderSession
    progress_display: ProgressDisplay
    record_display: RecordDisplay
    result_display: ResultDisplay
    failed: bool

    def __init__(
        self,
        args: CLIArgs,
        *,
        app: BatchTagService | None = None,
        session: FolderSession | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            app: Batch service; built with the default adapters when omitted.
            session: Folder session; shares the service's tag adapter when omitted.
        """
        self.args = args
        self.app = app or BatchTagService()
        self.session = session or FolderSession(tag_io_factory=lambda: self.app.tag_io)
        self.progress_display = ProgressDisplay()
        self.record_display = RecordDisplay()
        self.result_display = ResultDisplay()
        # Set by commands that fail before any batch runs.
        self.failed = False

    @abstractmethod
    def execute(self) -> list[BatchResult]:
        """Execute the command.

        Returns:
            List of batch results.
        """
        pass

    def has_failures(self, results: Sequence[BatchResult]) -> bool:
        return self.failed or any(result.skipped or result.failed for result in results)

    def load_records(self) -> list[MetadataRecord]:
        """Read the selection named on the command line.

        Folders are scanned through the folder session; with no paths the
        last opened folder is reopened. Unreadable files are logged and
        mark the command as failed.
        """
        if not self.args.paths:
            reopened = self.session.open_last(include_subfolders=self.args.recursive)
            if reopened is None:
                logger.error("No path given and no previously opened folder to reopen")
                self.failed = True
                return []
            return list(reopened)

        records: list[MetadataRecord] = []
        for path in self.args.paths:
            if path.is_dir():
                records.extend(self.session.open(path, include_subfolders=self.args.recursive))
                continue
            try:
                records.append(self.app.tag_io.read_tag(path))
            except BatchTagError as exc:
                logger.error("Cannot read %s: %s", path, exc)
                self.failed = True

        if not records:
            logger.warning("No audio files found")
        return records

    def run_batch(
        self,
        description: str,
        operation: Callable[[ProgressCallback], BatchResult],
    ) -> BatchResult:
        """Run ``operation`` behind a progress bar and display its summary."""

        result = self.progress_display.run(description, operation)
        self.result_display.show_result(result, quiet=self.args.quiet)
        return result
