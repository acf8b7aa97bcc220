"""Configuration loading and updating for the logging system.

The logger is created before the config package is importable, so it
starts from bootstrap defaults and is updated once settings are loaded.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from onecode_linux.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV,
    LOG_FILE_NAME,
)
from onecode_linux.logger.handlers import is_console_handler, level_number

if TYPE_CHECKING:
    from onecode_linux.domain.types import GlobalConfig
    from onecode_linux.logger.state import LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    ONECODE_LINUX_LOG_DIR overrides the log directory; the test suite
    sets it so test runs never write to the user's log file.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / DEFAULT_CONFIG_SUBDIR
            / CONFIG_DIR_NAME
            / "logs"
            / LOG_FILE_NAME
        )

    return "INFO", DEFAULT_LOG_LEVEL, log_path


def apply_levels(
    state: "LoggerState", console_level: str, file_level: str
) -> None:
    """Set console and file handler levels on the running listener.

    Args:
        state: Logger state object
        console_level: Level name for the console handler
        file_level: Level name for the file handler

    """
    if state.queue_listener is None:
        return

    for handler in state.queue_listener.handlers:
        level = console_level if is_console_handler(handler) else file_level
        handler.setLevel(level_number(level))


def update_logger_from_config(
    state: "LoggerState", config: "GlobalConfig | None" = None
) -> None:
    """Update logger handler levels from settings.conf.

    Only updates handler levels, never adds or removes handlers.

    Args:
        state: Shared logging state
        config: Already loaded configuration; read from disk if omitted

    """
    if config is None:
        try:
            # Import here to avoid circular dependency
            from onecode_linux.config import ConfigManager  # noqa: PLC0415

            config = ConfigManager().load_global_config()
        except (ImportError, KeyError, OSError, ValueError):
            # Config not usable yet - keep bootstrap defaults
            return

    apply_levels(state, config["console_log_level"], config["log_level"])
