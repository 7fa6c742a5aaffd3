"""
Core Log Utilities for pyqt-stepeditor.

Logger setup and log file discovery for applications embedding the editor.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

from pyqt_stepeditor.protocols.editor_config import get_editor_config

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_log_dir() -> Path:
    """Return configured log directory or default."""
    config = get_editor_config()
    if config.log_dir:
        return Path(config.log_dir)
    return Path.home() / ".local" / "share" / "pyqt_stepeditor" / "logs"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  to_log_dir: bool = False) -> logging.Logger:
    """
    Configure the editor's root logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to
        to_log_dir: Write to a timestamped file in get_log_dir() when
            log_file is not given

    Returns:
        The configured logger
    """
    config = get_editor_config()
    root_logger = logging.getLogger(config.log_root_logger_name)
    root_logger.setLevel(level)

    # Avoid duplicate handlers when called again
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is None and to_log_dir:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = str(log_dir / f"{config.log_file_prefix}{int(time.time())}.log")

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized.")
    return root_logger


def get_current_log_file_path() -> Optional[str]:
    """Get the file the editor's logger currently writes to, if any."""
    config = get_editor_config()
    for name in (config.log_root_logger_name, None):
        for handler in logging.getLogger(name).handlers:
            if isinstance(handler, logging.FileHandler):
                return handler.baseFilename
    return None
