"""Shared constants for 1code-linux.

Paths, defaults, file names and log formats used across the package.
Kept free of imports from the rest of the package so every module can
depend on it.
"""

from typing import Final

# Application identity
APP_NAME: Final[str] = "1code-linux"
UPDATE_COMMAND_NAME: Final[str] = "update-1code"

# Upstream source and installer release location
DEFAULT_REPO_URL: Final[str] = "https://github.com/21st-dev/1code.git"
DEFAULT_INSTALLER_REPO: Final[str] = "CorentinLumineau/1code-linux"
GITHUB_API_BASE: Final[str] = "https://api.github.com"
GITHUB_BASE_URL: Final[str] = "https://github.com"

# Installed application layout (from the upstream .deb)
DEFAULT_APP_PATH: Final[str] = "/opt/1Code/21st-desktop"
DEFAULT_SANDBOX_PATH: Final[str] = "/opt/1Code/chrome-sandbox"

# Configuration directory names (relative to home)
DEFAULT_CONFIG_SUBDIR: Final[str] = ".config"
CONFIG_DIR_NAME: Final[str] = "1code-linux"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
LOG_FILE_NAME: Final[str] = "1code-linux.log"
LOG_DIR_ENV: Final[str] = "ONECODE_LINUX_LOG_DIR"

# Configuration file structure
GLOBAL_CONFIG_VERSION: Final[str] = "1.0.0"
SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_SOURCE: Final[str] = "source"
SECTION_NETWORK: Final[str] = "network"
SECTION_DIRECTORY: Final[str] = "directory"
SECTION_APP: Final[str] = "app"
KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_MAX_BACKUP: Final[str] = "max_backup"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
DIRECTORY_KEYS: Final[tuple[str, ...]] = (
    "install",
    "bin",
    "settings",
    "backup",
    "logs",
)

# Defaults
DEFAULT_MAX_BACKUP: Final[int] = 5
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S%z"

# Settings of the installed application (relative to its settings dir)
CRITICAL_SETTINGS_FILES: Final[tuple[str, ...]] = ("data/agents.db",)
INFORMATIONAL_SETTINGS_FILES: Final[tuple[str, ...]] = (
    "auth.dat",
    "window-state.json",
)

# Backup naming: backup-2026-10-16T20-30-00-123456Z[-001]
BACKUP_PREFIX: Final[str] = "backup-"
BACKUP_TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H-%M-%S-%fZ"
BACKUP_NAME_PATTERN: Final[str] = (
    r"^backup-(?P<stamp>\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d+Z)"
    r"(?:-(?P<counter>\d+))?$"
)
BACKUP_COUNTER_WIDTH: Final[int] = 3

# Build
NATIVE_MODULES: Final[str] = "better-sqlite3,node-pty"
BUN_LOCKFILES: Final[tuple[str, ...]] = ("bun.lock", "bun.lockb")
SOURCE_MAP_SUPPORT_SHIM: Final[str] = "module.exports={install:()=>{}}\n"
BUN_INSTALL_HINT: Final[str] = "bun (curl -fsSL https://bun.sh/install | bash)"

# Logging
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
    "RESET": "\033[0m",
}
