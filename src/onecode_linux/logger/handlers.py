"""Handlers behind the root logger.

Records are put on a queue by the only handler attached to the
``onecode_linux`` logger; a QueueListener thread hands them to the console
and rotating file handlers, so coroutines never wait on terminal or disk
writes.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from onecode_linux.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from onecode_linux.logger.formatters import HybridConsoleFormatter
from onecode_linux.logger.state import LoggerState

ROOT_LOGGER_NAME = "onecode_linux"


class ConfigurationError(Exception):
    """Error in logging configuration."""


def level_number(name: str) -> int:
    """Map a level name to its number; unknown names mean INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def is_console_handler(handler: logging.Handler) -> bool:
    """RotatingFileHandler is a StreamHandler too; exclude it."""
    return isinstance(handler, logging.StreamHandler) and not isinstance(
        handler, RotatingFileHandler
    )


def console_handler(level: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT, datefmt=LOG_CONSOLE_DATE_FORMAT
        )
    )
    handler.setLevel(level_number(level))
    return handler


def file_handler(log_file: Path, level: str) -> RotatingFileHandler:
    """Create the rotating log file handler, creating its directory.

    Raises:
        ConfigurationError: If the log directory or file is not writable

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Cannot write log file {log_file}: {e}"
        raise ConfigurationError(msg) from e

    handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    handler.setLevel(level_number(level))
    return handler


def install_root_handlers(
    state: LoggerState,
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """Attach the queue handler to the root logger and start the listener.

    Args:
        state: Shared logging state, updated in place
        console_level: Level name for terminal output
        file_level: Level name for the log file
        log_file: Log file path, or None to log to the console only

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    handlers: list[logging.Handler] = [console_handler(console_level)]
    if log_file is not None:
        handlers.append(file_handler(log_file, file_level))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    root.propagate = False
    for stale in root.handlers[:]:
        root.removeHandler(stale)
        stale.close()

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue, *handlers, respect_handler_level=True
    )
    state.queue_listener.start()
    root.addHandler(QueueHandler(state.log_queue))
