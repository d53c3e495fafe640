"""Display management for CLI interface."""

from batchtag.ui.cli.display.progress import ProgressDisplay
from batchtag.ui.cli.display.records import RecordDisplay
from batchtag.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "RecordDisplay", "ResultDisplay"]
