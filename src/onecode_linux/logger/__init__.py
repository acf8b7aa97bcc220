"""Logging utilities for 1code-linux.

Structured logging with:
- Colored console output (bare message for INFO)
- File rotation using RotatingFileHandler
- QueueHandler/QueueListener so awaiting code never blocks on log I/O
- Hierarchical logger names (onecode_linux.core.git, ...)

Usage:
    >>> from onecode_linux.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Checking out %s", tag)  # %-style, never f-strings

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are attached only to the root "onecode_linux" logger
"""

from typing import TYPE_CHECKING

from onecode_linux.logger.config import (
    update_logger_from_config as _update_config,
)
from onecode_linux.logger.formatters import HybridConsoleFormatter
from onecode_linux.logger.handlers import ConfigurationError
from onecode_linux.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from onecode_linux.logger.state import get_state

if TYPE_CHECKING:
    from onecode_linux.domain.types import GlobalConfig

__all__ = [
    "ConfigurationError",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config: "GlobalConfig | None" = None) -> None:
    """Update logger handler levels from settings.conf (or config)."""
    _update_config(get_state(), config)
