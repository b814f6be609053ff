# tests/test_logging_config.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from task_api.app.core.logging_config import LOGGER_NAME, parse_log_level, setup_logging


@pytest.fixture()
def clean_logger() -> Iterator[logging.Logger]:
    """Run with a bare task_api logger and put the original handlers back afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_parse_log_level() -> None:
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level(" Warning ") == logging.WARNING
    with pytest.raises(ValueError, match="unknown log level"):
        parse_log_level("chatty")


def test_setup_configures_package_logger_only(clean_logger: logging.Logger) -> None:
    root_handlers = logging.getLogger().handlers[:]

    logger = setup_logging("DEBUG")

    assert logger is clean_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logging.getLogger().handlers == root_handlers


def test_repeated_setup_updates_level_without_duplicate_handlers(
    clean_logger: logging.Logger, tmp_path: Path
) -> None:
    logfile = str(tmp_path / "api.log")
    setup_logging("INFO", logfile)
    setup_logging("WARNING", logfile)

    assert clean_logger.level == logging.WARNING
    assert len(clean_logger.handlers) == 2


def test_file_handler_writes_child_logger_records(clean_logger: logging.Logger, tmp_path: Path) -> None:
    logfile = tmp_path / "api.log"
    setup_logging("INFO", str(logfile))

    logging.getLogger("task_api.app.services.task_service").info("Created task %s", 7)
    for handler in clean_logger.handlers:
        handler.flush()

    assert "[INFO] task_api.app.services.task_service: Created task 7" in logfile.read_text(encoding="utf-8")
