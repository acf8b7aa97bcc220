"""Settings backup module for protecting 1Code's user data.

Public API:
    - BackupManager: create, rotate, verify, list and restore backups
    - BackupOutcome / RestoreOutcome: result values with a status enum
    - SettingsReport: result of verifying a settings directory
    - copy_tree: default overlay copy primitive
"""

from onecode_linux.core.backup.helpers import copy_tree
from onecode_linux.core.backup.results import (
    BackupInfo,
    BackupOutcome,
    BackupStatus,
    FileStatus,
    RestoreOutcome,
    RestoreStatus,
    SettingsReport,
)
from onecode_linux.core.backup.service import BackupManager

__all__ = [
    "BackupInfo",
    "BackupManager",
    "BackupOutcome",
    "BackupStatus",
    "FileStatus",
    "RestoreOutcome",
    "RestoreStatus",
    "SettingsReport",
    "copy_tree",
]
