"""Domain types for configuration and settings.

Pure types used by business logic without any IO dependencies.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypedDict

from onecode_linux.constants import (
    CRITICAL_SETTINGS_FILES,
    INFORMATIONAL_SETTINGS_FILES,
)


class NetworkConfig(TypedDict):
    """Network configuration section."""

    timeout_seconds: int


class SourceConfig(TypedDict):
    """Upstream source repository and installer release location."""

    repo_url: str
    installer_repo: str


class DirectoryConfig(TypedDict):
    """Directory configuration section."""

    install: Path
    bin: Path
    settings: Path
    backup: Path
    logs: Path


class AppConfig(TypedDict):
    """Installed application locations."""

    app_path: Path
    sandbox_path: Path


class GlobalConfig(TypedDict):
    """Global configuration structure."""

    config_version: str
    max_backup: int
    log_level: str
    console_log_level: str
    source: SourceConfig
    network: NetworkConfig
    directory: DirectoryConfig
    app: AppConfig


@dataclass(frozen=True)
class SettingsProfile:
    """Files that define a usable settings directory.

    Attributes:
        critical_files: Relative paths that must exist for settings to be
            valid. Must not be empty.
        informational_files: Relative paths reported for display only.

    """

    critical_files: tuple[str, ...] = CRITICAL_SETTINGS_FILES
    informational_files: tuple[str, ...] = field(
        default=INFORMATIONAL_SETTINGS_FILES
    )

    def __post_init__(self) -> None:
        """Reject an empty critical file set."""
        if not self.critical_files:
            msg = "critical_files must contain at least one path"
            raise ValueError(msg)
