"""
logging_setup.py

Configure the root logger: always a stderr console handler, plus a file
handler when a log directory is given. Stdout is left alone because it
carries the lookup table.

Usage:
    logger = setup_logging(log_level="INFO", log_dir="log")
"""

import logging
import os
import sys
from typing import Optional

from thermistor_calculator import PACKAGE_LOGGER_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_FILE_NAME = "thermistor_calculator.log"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_CONSOLE_HANDLER_NAME = f"{PACKAGE_LOGGER_NAME}.console"
_FILE_HANDLER_NAME = f"{PACKAGE_LOGGER_NAME}.file"


def setup_logging(
    log_level: str = "WARNING",
    log_dir: Optional[str] = None,
    log_file_name: str = DEFAULT_LOG_FILE_NAME,
) -> logging.Logger:
    """
    Configure and return the root logger.

    Calling this more than once updates the level but never adds a second
    console or file handler.

    Args:
        log_level: Level name, e.g. "INFO".
        log_dir: Directory for the log file, created if missing. No file
            handler when None.
        log_file_name: File name inside log_dir.
    """
    root = logging.getLogger()
    root.setLevel(log_level.upper())

    formatter = logging.Formatter(LOG_FORMAT)
    existing = {handler.get_name() for handler in root.handlers}

    if _CONSOLE_HANDLER_NAME not in existing:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.set_name(_CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if log_dir and _FILE_HANDLER_NAME not in existing:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, log_file_name))
        file_handler.set_name(_FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
