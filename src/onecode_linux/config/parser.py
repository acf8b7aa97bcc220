"""INI parser utilities for 1code-linux configuration."""

from datetime import UTC, datetime

from onecode_linux.constants import (
    GLOBAL_CONFIG_VERSION,
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    SECTION_APP,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
    SECTION_SOURCE,
)


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments (anything after '  #') from a value."""
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class ConfigCommentManager:
    """Manages configuration file comments for user-facing documentation."""

    @staticmethod
    def get_file_header() -> str:
        """Generate file header comment with description and timestamp."""
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# 1code-linux Installer Configuration
# Settings for the unofficial 1Code installer/updater.
#
# Last updated: {timestamp}
# Configuration version: {GLOBAL_CONFIG_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Get comments for each configuration section."""
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
# config_version: Version of configuration format (DO NOT EDIT)
# max_backup: Number of settings backups to keep (1 or more)
# log_level: Detail level for log files (DEBUG, INFO, WARNING, ERROR)
# console_log_level: Console output detail level (DEBUG, INFO, etc.)

""",
            SECTION_SOURCE: """
# ========================================
# SOURCE
# ========================================
# repo_url: Git repository 1Code is built from
# installer_repo: GitHub owner/name used to check for installer upgrades

""",
            SECTION_NETWORK: """
# ========================================
# NETWORK CONFIGURATION
# ========================================
# timeout_seconds: Seconds to wait before timing out requests

""",
            SECTION_DIRECTORY: """
# ========================================
# DIRECTORY PATHS
# ========================================
# Use absolute paths or paths starting with ~ for home directory.
#
# install: Where the 1Code source is cloned and built
# bin: Where the update-1code helper is written
# settings: 1Code's own settings directory (backed up before updates)
# backup: Where settings backups are stored
# logs: Log files location

""",
            SECTION_APP: """
# ========================================
# INSTALLED APPLICATION
# ========================================
# app_path: Executable installed by the .deb package
# sandbox_path: Electron chrome-sandbox helper that needs setuid root

""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Get inline comments for specific configuration keys."""
        return {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: "# DO NOT MODIFY - Config format version",
            },
        }
