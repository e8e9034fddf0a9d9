"""Logging setup for the tips dashboard.

Log records go to stderr through rich so they never interleave with the
dashboard printed on stdout, and optionally to a size-rotated file.

Usage:
    from smarthub_tips.utils import setup_logging

    setup_logging(level="DEBUG")
    logging.getLogger(__name__).info("Loading tips")
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..config import get_settings

LOG_FILE_NAME = "smarthub_tips.log"

# Chatty at DEBUG: one line per provider connection / SQL statement
QUIET_LOGGERS = ("urllib3", "sqlalchemy.engine")

_logging_configured = False


def setup_logging(
    level: Optional[str] = None,
    log_to_file: Optional[bool] = None,
    log_dir: Optional[Path] = None,
) -> None:
    """Attach the console and file handlers to the root logger.

    Arguments left as None fall back to settings. Only the first call has
    an effect.
    """
    global _logging_configured
    if _logging_configured:
        return

    settings = get_settings()
    level = (level or settings.log_level).upper()
    log_to_file = settings.log_to_file if log_to_file is None else log_to_file
    log_dir = log_dir or settings.logs_dir

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format="%H:%M:%S",
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True
