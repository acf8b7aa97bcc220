"""Global configuration manager for INI settings."""

import configparser
import logging
from pathlib import Path

from onecode_linux.config.parser import (
    ConfigCommentManager,
    _strip_inline_comment,
)
from onecode_linux.config.paths import Paths
from onecode_linux.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_APP_PATH,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_INSTALLER_REPO,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_BACKUP,
    DEFAULT_REPO_URL,
    DEFAULT_SANDBOX_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    DIRECTORY_KEYS,
    GLOBAL_CONFIG_VERSION,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_MAX_BACKUP,
    SECTION_APP,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
    SECTION_SOURCE,
)
from onecode_linux.domain.types import (
    AppConfig,
    DirectoryConfig,
    GlobalConfig,
    NetworkConfig,
    SourceConfig,
)

logger = logging.getLogger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GlobalConfigManager:
    """Manages global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize global config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values."""
        return {
            KEY_CONFIG_VERSION: GLOBAL_CONFIG_VERSION,
            KEY_MAX_BACKUP: str(DEFAULT_MAX_BACKUP),
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_SOURCE: {
                "repo_url": DEFAULT_REPO_URL,
                "installer_repo": DEFAULT_INSTALLER_REPO,
            },
            SECTION_NETWORK: {
                "timeout_seconds": str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_DIRECTORY: {
                "install": str(Paths.INSTALL_DIR),
                "bin": str(Paths.BIN_DIR),
                "settings": str(Paths.APP_SETTINGS_DIR),
                "backup": str(Paths.BACKUP_DIR),
                "logs": str(self.config_dir / "logs"),
            },
            SECTION_APP: {
                "app_path": DEFAULT_APP_PATH,
                "sandbox_path": DEFAULT_SANDBOX_PATH,
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with the defaults dictionary."""
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from INI file.

        A missing file is created from defaults. User values override
        defaults key by key.

        Returns:
            Loaded global configuration

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            config.read(self.settings_file, encoding="utf-8")
        else:
            self.save_global_config(self._convert_to_global_config(config))

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file with comments."""
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: config["config_version"],
                KEY_MAX_BACKUP: str(config["max_backup"]),
                KEY_LOG_LEVEL: config["log_level"],
                KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            },
            SECTION_SOURCE: dict(config["source"]),
            SECTION_NETWORK: {
                key: str(value) for key, value in config["network"].items()
            },
            SECTION_DIRECTORY: {
                key: str(path) for key, path in config["directory"].items()
            },
            SECTION_APP: {
                key: str(path) for key, path in config["app"].items()
            },
        }

        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())
            for section, values in sections.items():
                f.write(section_comments[section])
                f.write(f"[{section}]\n")
                comments = key_comments.get(section, {})
                for key, value in values.items():
                    inline_comment = comments.get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert a populated ConfigParser to typed GlobalConfig."""

        # Section items without DEFAULT values bleeding in
        def section(name: str) -> dict[str, str]:
            return {
                key: _strip_inline_comment(value)
                for key, value in config.items(name, raw=True)
                if key not in config.defaults()
            }

        defaults = {
            key: _strip_inline_comment(value)
            for key, value in config.defaults().items()
        }

        directory = section(SECTION_DIRECTORY)
        directory_config = DirectoryConfig(
            **{
                key: Paths.expand_path(directory[key])
                for key in DIRECTORY_KEYS
            }
        )

        source = section(SECTION_SOURCE)
        app = section(SECTION_APP)

        return GlobalConfig(
            config_version=defaults.get(
                KEY_CONFIG_VERSION, GLOBAL_CONFIG_VERSION
            ),
            max_backup=self._parse_max_backup(defaults.get(KEY_MAX_BACKUP)),
            log_level=self._parse_level(
                defaults.get(KEY_LOG_LEVEL), DEFAULT_LOG_LEVEL
            ),
            console_log_level=self._parse_level(
                defaults.get(KEY_CONSOLE_LOG_LEVEL),
                DEFAULT_CONSOLE_LOG_LEVEL,
            ),
            source=SourceConfig(
                repo_url=source["repo_url"],
                installer_repo=source["installer_repo"],
            ),
            network=NetworkConfig(
                timeout_seconds=self._parse_int(
                    section(SECTION_NETWORK).get("timeout_seconds"),
                    DEFAULT_TIMEOUT_SECONDS,
                ),
            ),
            directory=directory_config,
            app=AppConfig(
                app_path=Path(app["app_path"]),
                sandbox_path=Path(app["sandbox_path"]),
            ),
        )

    @staticmethod
    def _parse_int(value: str | None, default: int) -> int:
        """Parse an integer value, falling back to default."""
        try:
            return int(value) if value is not None else default
        except ValueError:
            logger.warning("Invalid integer %r, using %s", value, default)
            return default

    def _parse_max_backup(self, value: str | None) -> int:
        """Parse max_backup; the retention limit must be at least 1."""
        max_backup = self._parse_int(value, DEFAULT_MAX_BACKUP)
        if max_backup < 1:
            logger.warning(
                "max_backup must be at least 1 (got %s), using %s",
                max_backup,
                DEFAULT_MAX_BACKUP,
            )
            return DEFAULT_MAX_BACKUP
        return max_backup

    @staticmethod
    def _parse_level(value: str | None, default: str) -> str:
        """Parse a log level name, falling back to default."""
        level = (value or default).upper()
        if level not in _VALID_LEVELS:
            logger.warning("Invalid log level %r, using %s", value, default)
            return default
        return level
