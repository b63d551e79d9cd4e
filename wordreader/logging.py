"""
Logging setup for the word reader command line.

Diagnostics go to stderr, optionally colored by level, and to a rotating
log file when one is requested. Standard output is left to the words.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path


ROOT_LOGGER = "wordreader"

RESET = "\033[0m"

# ANSI color per log level
LEVEL_COLORS = {
    logging.DEBUG: "\033[2m\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1m\033[91m",
}

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of each record."""

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname = record.levelname
        record.levelname = f"{LEVEL_COLORS.get(record.levelno, '')}{levelname}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


@dataclass
class LogConfig:
    """Logging configuration."""

    console_level: str = "WARNING"
    console_colors: bool = True

    # Rotating log file, off unless a path is given
    file_path: str | None = None
    file_level: str = "DEBUG"
    file_max_bytes: int = 1024 * 1024
    file_backup_count: int = 3

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    return LEVELS.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Configure the ``wordreader`` logger tree.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level(config.console_level))
    use_colors = config.console_colors and sys.stderr.isatty()
    console_handler.setFormatter(ColoredFormatter(config.format, config.date_format, use_colors))
    root_logger.addHandler(console_handler)

    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(logging.Formatter(config.format, config.date_format))
        root_logger.addHandler(file_handler)

    # The HTTP stack logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging_from_args(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    log_file: str | None = None,
    colors: bool = True,
) -> None:
    """Setup logging from the command-line flags."""
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = "WARNING"

    setup_logging(LogConfig(console_level=level, console_colors=colors, file_path=log_file))


def get_logger(name: str) -> logging.Logger:
    """Get a logger below ``wordreader``."""
    if name.startswith(ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
