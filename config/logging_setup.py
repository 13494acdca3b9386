"""
Logging Setup

Root logger configuration shared by the Streamlit page and the CLI script.
Logs to stdout and to a daily-rotated file.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from config.settings import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_FALLBACK_DIR,
    LOG_FILE_NAME,
    LOG_LEVEL,
)

LOG_FORMAT = "%(asctime)s %(levelname)s - %(message)s | %(name)s"


def _file_handler(log_file: Path) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        str(log_file),
        when="midnight",
        interval=1,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(level: Optional[str] = None, log_to_file: bool = True) -> None:
    """
    Setup logging with rotation.

    Safe to call more than once (Streamlit re-runs the page script):
    handlers are only attached the first time.

    Args:
        level: Log level name, defaults to LOG_LEVEL from settings
        log_to_file: Also write to LOG_DIR (or ./logs if not writable)
    """
    logger = logging.getLogger()
    logger.setLevel(level or LOG_LEVEL)

    if getattr(logger, "_ripeness_configured", False):
        return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("%(message)s | %(name)s"))
    logger.addHandler(console_handler)

    if log_to_file:
        log_file = Path(LOG_DIR) / LOG_FILE_NAME
        try:
            logger.addHandler(_file_handler(log_file))
        except (PermissionError, FileNotFoundError):
            # Fallback to local logs directory if LOG_DIR not writable
            logs_dir = Path(LOG_FALLBACK_DIR)
            logs_dir.mkdir(exist_ok=True)
            fallback_log = logs_dir / LOG_FILE_NAME
            logger.warning(
                f"Cannot write to {log_file}, using fallback: {fallback_log}",
            )
            logger.addHandler(_file_handler(fallback_log))

    logger._ripeness_configured = True
