"""
Logging configuration for the Task API.

Only the ``task_api`` logger is configured; everything in the package
logs through ``logging.getLogger(__name__)`` and therefore inherits its
handlers and level.  The root logger is left to whoever hosts the
application (uvicorn, the test runner), and records still propagate to
it.
"""

import logging
import os
from typing import Optional


LOGGER_NAME = "task_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_log_level(level: str) -> int:
    """Return the numeric level for a name such as ``"debug"``.

    Raises
    ------
    ValueError
        If ``level`` is not a standard logging level name.
    """
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level: {level!r}")
    return numeric_level


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the ``task_api`` logger.

    The level is applied on every call, so a later ``create_app`` with
    different settings takes effect.  Handlers are attached only once:
    a console handler, plus a UTF-8 file handler when ``logfile`` is
    given and no handler already writes to that file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(parse_log_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = os.path.abspath(logfile)
        existing = {
            h.baseFilename for h in logger.handlers if isinstance(h, logging.FileHandler)
        }
        if log_path not in existing:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
