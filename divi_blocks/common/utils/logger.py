import logging
import sys
import os
from typing import Any

NOTICE_LEVEL = 25
logging.addLevelName(NOTICE_LEVEL, "NOTICE")

LOGGER_NAMESPACE = "divi_blocks"

RESET = "\033[0m"
COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "NOTICE": "\033[38;5;33m",  # Blue-ish
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[1;41m",  # White on red
}

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Colors the level name; the record itself is left untouched for other handlers."""

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        record.levelname = f"{COLORS.get(original, '')}{original:<7}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


# info() is promoted to NOTICE so progress messages reach the console
class CustomLogger(logging.Logger):
    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        super().log(NOTICE_LEVEL, msg, *args, **kwargs)


logging.setLoggerClass(CustomLogger)


def configure_logging(console_level: int | str | None = None, log_dir: str | None = None) -> logging.Logger:
    """(Re)attach the console and file handlers to the package logger.

    Console: stdout, NOTICE and above unless `DIVI_BLOCKS_LOG_LEVEL` says otherwise.
    File: everything under the package namespace, in `<log_dir>/app.log`.
    """
    console_level = console_level or os.environ.get("DIVI_BLOCKS_LOG_LEVEL") or NOTICE_LEVEL
    log_dir = log_dir or os.environ.get("DIVI_BLOCKS_LOG_DIR") or os.path.join(os.getcwd(), "logs")
    os.makedirs(log_dir, exist_ok=True)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    file_handler = logging.FileHandler(os.path.join(log_dir, "app.log"), encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    file_handler.addFilter(lambda record: record.name.startswith(LOGGER_NAMESPACE))

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(logging.DEBUG)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.addHandler(console_handler)
    package_logger.addHandler(file_handler)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package namespace."""
    if not name or name == LOGGER_NAMESPACE:
        return logging.getLogger(LOGGER_NAMESPACE)
    if not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)


logger = configure_logging()
logger.debug("Logger initialized successfully.")
