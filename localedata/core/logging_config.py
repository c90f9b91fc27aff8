"""Logging configuration for applications embedding localedata."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Log levels for package components
LOGGING_CONFIG = {
    "localedata": logging.INFO,
    "localedata.core": logging.INFO,
    "localedata.core.bundles": logging.INFO,

    # Reduce noise from libraries
    "pydantic": logging.WARNING,
    "dotenv": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        result = super().format(record)

        # Reset levelname for other handlers
        record.levelname = levelname

        return result


def setup_logging(
    log_file: bool = False,
    debug: bool = False,
    level: Optional[str] = None,
    log_dir: str = "logs",
) -> None:
    """Configure console (and optionally file) logging."""

    console_level = logging.DEBUG if debug else logging.getLevelName(level or "INFO")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else min(console_level, logging.INFO))

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_formatter = ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_filename = log_path / f"localedata_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    for logger_name, logger_level in LOGGING_CONFIG.items():
        logger = logging.getLogger(logger_name)
        # Package loggers never hide records the console asked for
        if logger_name.startswith("localedata"):
            logger_level = min(logger_level, console_level)
        logger.setLevel(logging.DEBUG if debug else logger_level)

    logging.getLogger(__name__).info(
        f"Logging configured (console={logging.getLevelName(console_level)}, "
        f"file={'ENABLED' if log_file else 'DISABLED'})"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
