"""
Logging configuration for fqcn_stripper.

The library only emits records on the "fqcn_stripper" logger hierarchy and
never configures handlers on import. Applications that want the records call
setup_logging() once.

File logs go to <log_dir>/fqcn-stripper-YYYY-MM-DD.log (rotated daily).
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "fqcn_stripper"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class FlushingHandler(logging.handlers.TimedRotatingFileHandler):
    """Handler that flushes after every emit for immediate visibility."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    console: bool = False,
    backup_count: int = 30,
) -> logging.Logger:
    """
    Set up logging for fqcn_stripper.

    Safe to call repeatedly: handlers that already exist are not duplicated.

    Args:
        level: Logging level (default: INFO)
        log_dir: Directory for daily-rotated log files (default: no file logging)
        console: If True, also log to stderr
        backup_count: Number of daily backup files to keep (default: 30 days)

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    has_file_handler = any(isinstance(h, FlushingHandler) for h in logger.handlers)
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    )

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if log_dir is not None and not has_file_handler:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"fqcn-stripper-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = FlushingHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info(f"Log file: {log_file}")
        logger.info(f"Log level: {logging.getLevelName(level)}")

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger within the fqcn_stripper hierarchy.

    Args:
        name: Logger name, either "fqcn_stripper" or a dotted child of it;
            bare child names ("core") are prefixed automatically

    Returns:
        Logger instance
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
