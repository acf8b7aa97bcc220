"""Public logging functions.

The first ``get_logger`` call starts the queue listener; every later call
just returns a child of the ``onecode_linux`` logger.
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from onecode_linux.logger.config import load_log_settings
from onecode_linux.logger.handlers import (
    ROOT_LOGGER_NAME,
    install_root_handlers,
    is_console_handler,
    level_number,
)
from onecode_linux.logger.state import get_state

_DRAIN_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Block until queued records are written.

    Called before prompting on stdin so progress lines appear above the
    question, and before the process exits.
    """
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    deadline = time.monotonic() + _DRAIN_TIMEOUT_SECONDS
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)
    # The listener thread may still be emitting the last record it took
    time.sleep(0.1)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _stop_listener() -> None:
    state = get_state()
    if state.queue_listener is None:
        return
    flush_all_handlers()
    state.queue_listener.stop()
    state.queue_listener = None
    state.log_queue = None


atexit.register(_stop_listener)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Start logging on first use and return the named logger.

    Levels and the log path not given here come from the bootstrap
    defaults; settings.conf is applied later by
    ``update_logger_from_config``.

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    state = get_state()
    with state.lock:
        if not state.initialized:
            default_console, default_file, default_path = load_log_settings()
            install_root_handlers(
                state,
                console_level or default_console,
                file_level or default_file,
                (log_file or default_path) if enable_file_logging else None,
            )
    return logging.getLogger(name)


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Return a logger in the ``onecode_linux`` hierarchy.

    >>> logger = get_logger(__name__)
    >>> logger.info("🔄 Checking out %s...", tag)
    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


def set_console_level(level: str) -> str | None:
    """Set the console handler level and return the previous level name.

    Returns None when logging has not started yet.
    """
    state = get_state()
    if state.queue_listener is None:
        return None

    previous = None
    for handler in state.queue_listener.handlers:
        if is_console_handler(handler):
            previous = logging.getLevelName(handler.level)
            handler.setLevel(level_number(level))
    return previous


def clear_logger_state() -> None:
    """Stop the listener and forget every ``onecode_linux`` logger.

    For tests; the next ``get_logger`` call starts from scratch.
    """
    state = get_state()
    with state.lock:
        _stop_listener()
        manager = logging.Logger.manager
        for logger_name in list(manager.loggerDict):
            if not logger_name.startswith(ROOT_LOGGER_NAME):
                continue
            instance = manager.loggerDict.pop(logger_name)
            if isinstance(instance, logging.Logger):
                for handler in instance.handlers[:]:
                    instance.removeHandler(handler)
                    handler.close()
