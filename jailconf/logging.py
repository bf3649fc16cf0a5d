"""
Logging setup for the jailconf command line.

Console records go to stderr, colored when stderr is a terminal, so they
never mix with a tree printed on stdout. An optional log file receives
everything from DEBUG up.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 3

RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[2;36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;91m",
}

# Logger name component -> color
COMPONENT_COLORS = {
    "loader": "\033[35m",
    "main": "\033[32m",
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level and component name of a record."""

    def __init__(self, use_colors: bool = True):
        super().__init__(LOG_FORMAT, DATE_FORMAT)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname, name = record.levelname, record.name
        record.levelname = f"{LEVEL_COLORS.get(record.levelno, '')}{levelname}{RESET}"
        component = name.rsplit(".", 1)[-1]
        if component in COMPONENT_COLORS:
            record.name = f"{COMPONENT_COLORS[component]}{name}{RESET}"

        try:
            return super().format(record)
        finally:
            record.levelname, record.name = levelname, name


@dataclass
class LogConfig:
    """Logging options taken from the command line."""

    console_level: str = "warning"
    console_colors: bool = True
    file_path: str | None = None


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }
    return levels.get(level_str.lower(), logging.WARNING)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Configure the ``jailconf`` logger hierarchy.

    Args:
        config: Logging options (uses defaults if None)
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger("jailconf")
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level(config.console_level))
    use_colors = config.console_colors and sys.stderr.isatty()
    console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))
    root_logger.addHandler(console_handler)

    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``jailconf`` namespace."""
    if name.startswith("jailconf"):
        return logging.getLogger(name)
    return logging.getLogger(f"jailconf.{name}")
