"""Result types for settings backup, restore and verification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class BackupStatus(Enum):
    """Outcome of a create_backup call."""

    CREATED = "created"
    NOTHING_TO_BACK_UP = "nothing_to_back_up"
    DIRECTORY_FAILED = "directory_failed"
    COPY_FAILED = "copy_failed"
    VERIFICATION_FAILED = "verification_failed"


class RestoreStatus(Enum):
    """Outcome of a restore_backup call."""

    RESTORED = "restored"
    NOT_FOUND = "not_found"
    COPY_FAILED = "copy_failed"
    VERIFICATION_FAILED = "verification_failed"


@dataclass(slots=True, frozen=True)
class BackupOutcome:
    """Result of creating a settings backup.

    Attributes:
        status: What happened
        path: Backup directory; set for every status except
            NOTHING_TO_BACK_UP so a failed attempt can be inspected
        message: Human readable detail naming the paths involved
        missing: Critical files absent from the backup

    """

    status: BackupStatus
    path: Path | None = None
    message: str = ""
    missing: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """True when settings are protected or there was nothing to protect."""
        return self.status in (
            BackupStatus.CREATED,
            BackupStatus.NOTHING_TO_BACK_UP,
        )


@dataclass(slots=True, frozen=True)
class RestoreOutcome:
    """Result of restoring a settings backup."""

    status: RestoreStatus
    backup_path: Path
    settings_dir: Path
    message: str = ""
    missing: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """True when the restore copied and verified."""
        return self.status is RestoreStatus.RESTORED


@dataclass(slots=True, frozen=True)
class FileStatus:
    """Presence and size of one tracked settings file."""

    relative_path: str
    critical: bool
    size: int | None

    @property
    def exists(self) -> bool:
        """True if the file was found."""
        return self.size is not None


@dataclass(slots=True, frozen=True)
class SettingsReport:
    """Result of inspecting a settings directory.

    Attributes:
        settings_dir: Directory that was inspected
        missing: Critical files that were not found, in profile order
        files: Every critical and informational file with its size

    """

    settings_dir: Path
    missing: tuple[str, ...]
    files: tuple[FileStatus, ...]

    @property
    def ok(self) -> bool:
        """True iff no critical file is missing."""
        return not self.missing


@dataclass(slots=True, frozen=True)
class BackupInfo:
    """A backup directory found under the backup root."""

    name: str
    path: Path
    created: datetime | None
