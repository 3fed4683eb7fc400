"""Debug log setup. Output goes to a file so console prompts stay clean."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pizza_palace.config import DEBUG_LOG_PATH, LOG_LEVEL

LOGGER_NAME = "pizza_palace"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(path: str | Path = DEBUG_LOG_PATH, level: str | int = LOG_LEVEL) -> logging.Logger:
    """
    Point the package logger's debug file at ``path``.

    Calling again with the same path is a no-op; a different path replaces
    the previous debug file. Handlers that are not file handlers (a host
    application's or a test runner's) are left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    target = os.path.abspath(path)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.FileHandler):
            continue
        if handler.baseFilename == target:
            handler.setLevel(level)
            return logger
        logger.removeHandler(handler)
        handler.close()

    log_file = Path(target)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger
