# design_consts/logging_setup.py
"""
Logging configuration for design-consts and its showcase.

The root logger stays at INFO so Qt and other libraries do not flood the
log; the project's own package loggers drop to DEBUG in debug mode.
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from design_consts.config import get_config_dir

LOG_FILE_NAME = "app.log"
PACKAGE_LOGGERS = ("design_consts", "showcase_qt")

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
CONSOLE_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> Path:
    """
    Configure application-wide logging.

    - Logs to <config dir>/app.log (rotating, max ~1 MB, 3 backups)
    - Also logs to console (stderr) for interactive runs
    - Re-running replaces the handlers of a previous call

    Args:
        debug: Emit DEBUG records from the project's own packages
        log_dir: Directory for the log file (defaults to ~/.design_consts)

    Returns:
        Path of the log file
    """
    if log_dir is None:
        log_dir = get_config_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    package_level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # Clear existing handlers (re-running in dev/REPL)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1_000_000,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    file_handler.setLevel(package_level)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(package_level)
    root_logger.addHandler(console_handler)

    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(package_level)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized (debug={debug})")
    logger.info(f"Log file: {log_file}")
    return log_file
