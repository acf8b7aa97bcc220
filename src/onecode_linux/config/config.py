"""Configuration facade for 1code-linux.

Coordinates the INI settings manager (global.py) and builds the value
objects the core components are constructed with.
"""

import importlib
from pathlib import Path

from onecode_linux.config.paths import Paths
from onecode_linux.domain.types import GlobalConfig, SettingsProfile

# Import from global module (avoiding keyword conflict)
_global_module = importlib.import_module("onecode_linux.config.global")
GlobalConfigManager = _global_module.GlobalConfigManager


class ConfigManager:
    """Facade that coordinates configuration access."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_dir: Optional custom config directory.
                Defaults to Paths.CONFIG_DIR

        """
        self._config_dir = config_dir or Paths.CONFIG_DIR
        self.global_config_manager = GlobalConfigManager(self._config_dir)

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir

    @property
    def settings_file(self) -> Path:
        """Get the settings file path."""
        return self.global_config_manager.settings_file

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from INI file."""
        return self.global_config_manager.load_global_config()

    def settings_profile(self) -> SettingsProfile:
        """Return the critical/informational file set for 1Code settings."""
        return SettingsProfile()

    def ensure_directories_from_config(self, config: GlobalConfig) -> None:
        """Ensure the tool's own directories exist.

        Only the backup, bin and log directories are created; the install
        and settings directories belong to git and to 1Code.

        Raises:
            ValueError: If a configured path is a file

        """
        for key in ("backup", "bin", "logs"):
            directory = config["directory"][key]
            if directory.exists() and directory.is_file():
                msg = (
                    f"Configured {key} path '{directory}' is a file, "
                    "not a directory"
                )
                raise ValueError(msg)
            directory.mkdir(parents=True, exist_ok=True)
