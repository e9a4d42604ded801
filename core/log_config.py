"""
Logging setup: rotating file log plus console output.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import Settings
from core.constants import LOG_BACKUP_COUNT, LOG_DATE_FORMAT, LOG_FORMAT, LOG_MAX_BYTES

PROJECT_LOGGERS = ("core", "app")


def setup_logging(settings: Settings) -> None:
    """
    Attach a rotating file handler to the project loggers.

    Safe to call on every Streamlit rerun: handlers are only added once.
    """
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    os.makedirs(settings.log_dir, exist_ok=True)
    log_path = os.path.join(settings.log_dir, settings.log_file)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            continue
        file_handler = RotatingFileHandler(
            log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Console output for everything else, including library warnings
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
