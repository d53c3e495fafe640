"""Logger bootstrap for batchtag.

Where: platform/logging/config.py
What: Build the ``batchtag`` logger (rich console plus rotating file) and
re-target it once the CLI knows the configured log file and verbosity.
Why: Importing any layer must be able to log before the configuration is read.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final, Protocol

from typing_extensions import override

from rich.console import Console

from batchtag.config.paths import default_log_file

from .handlers import PathRichHandler

LOGGER_NAME: Final = "batchtag"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

LOG_FILE_MAX_BYTES: Final = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final = 5

# Batch extras copied into the plain-text log, in this order.
BATCH_EXTRA_KEYS: Final = (
    "batch_event",
    "batch_id",
    "sequence",
    "total_files",
    "source_path",
    "target_path",
)


class LogSettings(Protocol):
    """The part of the configuration the logger reads."""

    log_file: Path | None


class BatchFileFormatter(logging.Formatter):
    """Plain formatter that appends batch extras as ``key=value`` pairs."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = [
            f"{key}={getattr(record, key)}" for key in BATCH_EXTRA_KEYS if hasattr(record, key)
        ]
        return f"{line} [{' '.join(pairs)}]" if pairs else line


def console_level_for(*, quiet: bool = False, verbose: bool = False) -> int:
    """Map the CLI verbosity flags to a console level. ``quiet`` wins."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def _console_handler(level: int) -> logging.Handler:
    handler = PathRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    resolved = log_file.expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(BatchFileFormatter("%(asctime)s %(levelname)-8s %(message)s"))
    return handler


def setup_logger(
    log_file: Path | None = None,
    *,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Replace the handlers of the ``batchtag`` logger.

    Args:
        log_file: Rotating log destination; ``None`` logs to the console only.
        console_level: Threshold for the rich console handler.
        file_level: Threshold for the file handler.

    Returns:
        logging.Logger: The shared ``batchtag`` logger.
    """
    target = logging.getLogger(LOGGER_NAME)
    target.setLevel(logging.DEBUG)
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()

    target.addHandler(_console_handler(console_level))
    if log_file is not None:
        target.addHandler(_file_handler(Path(log_file), file_level))
    return target


def configure_logging(
    settings: LogSettings,
    *,
    quiet: bool = False,
    verbose: bool = False,
) -> logging.Logger:
    """Point the logger at the configured log file with the CLI's verbosity."""
    return setup_logger(
        settings.log_file or DEFAULT_LOG_FILE,
        console_level=console_level_for(quiet=quiet, verbose=verbose),
    )


logger: Final[logging.Logger] = setup_logger(DEFAULT_LOG_FILE)


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "BatchFileFormatter",
    "LogSettings",
    "configure_logging",
    "console_level_for",
    "setup_logger",
    "logger",
]
