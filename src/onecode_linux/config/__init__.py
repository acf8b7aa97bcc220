"""Configuration management - settings file, paths and parser helpers.

- ConfigManager: Facade for configuration operations
- GlobalConfigManager: INI configuration management (from global.py)
- Paths: Path constants and utilities
"""

from onecode_linux.config.config import ConfigManager, GlobalConfigManager
from onecode_linux.config.parser import ConfigCommentManager
from onecode_linux.config.paths import Paths
from onecode_linux.domain.types import GlobalConfig

__all__ = [
    "ConfigCommentManager",
    "ConfigManager",
    "GlobalConfig",
    "GlobalConfigManager",
    "Paths",
]
