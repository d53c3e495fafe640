"""Tests for building and re-targeting the batchtag logger."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from batchtag.platform.logging import (
    DEFAULT_LOG_FILE,
    LOGGER_NAME,
    PathRichHandler,
    configure_logging,
    console_level_for,
    setup_logger,
)
from batchtag.shared.batch_types import BatchEvent, log_batch_event


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    yield
    _ = setup_logger(DEFAULT_LOG_FILE)


def _file_handlers(logger: logging.Logger) -> list[logging.handlers.RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]


@pytest.mark.parametrize(
    ("quiet", "verbose", "level"),
    [
        (False, False, logging.INFO),
        (False, True, logging.DEBUG),
        (True, False, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_console_level_for_flags(quiet: bool, verbose: bool, level: int) -> None:
    assert console_level_for(quiet=quiet, verbose=verbose) == level


def test_setup_logger_replaces_handlers(tmp_path: Path) -> None:
    _ = setup_logger(tmp_path / "first.log")
    logger = setup_logger(tmp_path / "nested" / "second.log", console_level=logging.WARNING)

    assert logger.name == LOGGER_NAME
    consoles = [h for h in logger.handlers if isinstance(h, PathRichHandler)]
    assert [h.level for h in consoles] == [logging.WARNING]
    assert [Path(h.baseFilename).name for h in _file_handlers(logger)] == ["second.log"]
    assert (tmp_path / "nested").is_dir()


def test_setup_logger_without_file_is_console_only() -> None:
    logger = setup_logger(None)

    assert _file_handlers(logger) == []
    assert len(logger.handlers) == 1


def test_file_log_carries_batch_extras(tmp_path: Path) -> None:
    log_file = tmp_path / "batchtag.log"
    _ = setup_logger(log_file)

    log_batch_event(
        logging.WARNING,
        BatchEvent.RECORD_ERROR,
        "cannot write",
        sequence=2,
        total_files=5,
        source_path=Path("/music/a.mp3"),
    )
    logging.getLogger(LOGGER_NAME).info("plain line")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith(
        "cannot write [batch_event=record.error sequence=2 total_files=5 source_path=/music/a.mp3]"
    )
    assert lines[1].endswith("plain line")


def test_configure_logging_uses_configured_file_and_verbosity(tmp_path: Path) -> None:
    settings = SimpleNamespace(log_file=tmp_path / "custom.log")

    logger = configure_logging(settings, verbose=True)

    assert [Path(h.baseFilename) for h in _file_handlers(logger)] == [
        (tmp_path / "custom.log").resolve()
    ]
    consoles = [h for h in logger.handlers if isinstance(h, PathRichHandler)]
    assert consoles[0].level == logging.DEBUG


def test_configure_logging_falls_back_to_default_file() -> None:
    logger = configure_logging(SimpleNamespace(log_file=None), quiet=True)

    assert [Path(h.baseFilename) for h in _file_handlers(logger)] == [
        DEFAULT_LOG_FILE.expanduser().resolve()
    ]
    consoles = [h for h in logger.handlers if isinstance(h, PathRichHandler)]
    assert consoles[0].level == logging.ERROR
