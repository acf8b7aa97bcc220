"""BackupManager for protecting 1Code's settings across rebuilds.

This module provides the service for:
- Creating timestamped snapshots of the settings directory
- Rotating old snapshots beyond the retention limit
- Verifying snapshots and restores against the critical file set
- Restoring a snapshot over the live settings directory
"""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from onecode_linux.core.backup.helpers import (
    copy_tree,
    describe_copy_error,
    remove_backup,
)
from onecode_linux.core.backup.naming import (
    is_backup_name,
    next_backup_name,
    parse_created,
    sort_key,
)
from onecode_linux.core.backup.results import (
    BackupInfo,
    BackupOutcome,
    BackupStatus,
    RestoreOutcome,
    RestoreStatus,
    SettingsReport,
)
from onecode_linux.core.backup.verification import (
    missing_from_backup,
    verify_backup_integrity,
    verify_settings,
)
from onecode_linux.domain.types import SettingsProfile
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

CopyTree = Callable[[Path, Path], None]
Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class BackupManager:
    """Create, rotate, verify and restore settings backups.

    Failures are returned as outcome values; only precondition
    violations raise.
    """

    def __init__(
        self,
        profile: SettingsProfile,
        copy_tree: CopyTree = copy_tree,
        clock: Clock = _utc_now,
    ) -> None:
        """Initialize backup manager with its collaborators.

        Args:
            profile: Critical and informational settings files
            copy_tree: Overlay copy primitive; raises OSError on failure
            clock: Source of the current time for backup names

        """
        self.profile = profile
        self._copy_tree = copy_tree
        self._clock = clock

    def create_backup(
        self,
        settings_dir: Path,
        backup_root: Path,
        retention_limit: int,
    ) -> BackupOutcome:
        """Snapshot settings_dir into a new backup under backup_root.

        Rotation runs first so that, once the new backup exists, at most
        retention_limit backups remain.

        Args:
            settings_dir: Live settings directory
            backup_root: Directory holding backup-* directories
            retention_limit: Maximum number of backups to keep (>= 1)

        Returns:
            Outcome describing the created backup or the failure

        Raises:
            ValueError: If retention_limit is less than 1

        """
        if retention_limit < 1:
            msg = f"retention_limit must be at least 1, got {retention_limit}"
            raise ValueError(msg)

        if not settings_dir.exists():
            logger.info(
                "No settings found at %s, nothing to back up", settings_dir
            )
            return BackupOutcome(
                BackupStatus.NOTHING_TO_BACK_UP,
                message=f"No settings directory at {settings_dir}",
            )

        self.rotate_backups(backup_root, retention_limit)

        existing = self.list_backups(backup_root)
        newest = existing[0].name if existing else None
        backup_path = backup_root / next_backup_name(self._clock(), newest)

        try:
            backup_path.mkdir(parents=True)
        except OSError as e:
            logger.error(
                "Failed to create backup directory %s: %s", backup_path, e
            )
            return BackupOutcome(
                BackupStatus.DIRECTORY_FAILED,
                path=backup_path,
                message=f"Could not create {backup_path}: {e}",
            )

        logger.debug("Copying %s -> %s", settings_dir, backup_path)
        try:
            self._copy_tree(settings_dir, backup_path)
        except OSError as e:
            detail = describe_copy_error(e)
            logger.error("Backup copy failed for %s: %s", backup_path, detail)
            return BackupOutcome(
                BackupStatus.COPY_FAILED,
                path=backup_path,
                message=f"Copy into {backup_path} failed: {detail}",
            )

        missing = missing_from_backup(settings_dir, backup_path, self.profile)
        if missing:
            logger.error(
                "Backup %s is missing critical files: %s",
                backup_path,
                ", ".join(missing),
            )
            return BackupOutcome(
                BackupStatus.VERIFICATION_FAILED,
                path=backup_path,
                message=(
                    f"Backup {backup_path} is missing: {', '.join(missing)}"
                ),
                missing=missing,
            )

        logger.info("Backup created: %s", backup_path)
        return BackupOutcome(
            BackupStatus.CREATED,
            path=backup_path,
            message=f"Settings backed up to {backup_path}",
        )

    def restore_backup(
        self, backup_path: Path, settings_dir: Path
    ) -> RestoreOutcome:
        """Copy a backup over the live settings directory and verify it.

        The copy overlays: files in settings_dir that the backup lacks are
        left in place.

        Args:
            backup_path: Backup directory to restore from
            settings_dir: Live settings directory (created if absent)

        Returns:
            Outcome describing the restore or the failure

        """
        if not backup_path.is_dir():
            logger.error("Backup not found: %s", backup_path)
            return RestoreOutcome(
                RestoreStatus.NOT_FOUND,
                backup_path=backup_path,
                settings_dir=settings_dir,
                message=f"Backup not found: {backup_path}",
            )

        logger.debug("Restoring %s -> %s", backup_path, settings_dir)
        try:
            settings_dir.mkdir(parents=True, exist_ok=True)
            self._copy_tree(backup_path, settings_dir)
        except OSError as e:
            detail = describe_copy_error(e)
            logger.error(
                "Restore copy failed for %s: %s", settings_dir, detail
            )
            return RestoreOutcome(
                RestoreStatus.COPY_FAILED,
                backup_path=backup_path,
                settings_dir=settings_dir,
                message=f"Copy into {settings_dir} failed: {detail}",
            )

        report = self.verify_settings(settings_dir)
        if not report.ok:
            logger.error(
                "Settings still missing after restore: %s",
                ", ".join(report.missing),
            )
            return RestoreOutcome(
                RestoreStatus.VERIFICATION_FAILED,
                backup_path=backup_path,
                settings_dir=settings_dir,
                message=(
                    f"{settings_dir} is still missing "
                    f"{', '.join(report.missing)} after restoring "
                    f"{backup_path.name}"
                ),
                missing=report.missing,
            )

        logger.info("Settings restored from %s", backup_path.name)
        return RestoreOutcome(
            RestoreStatus.RESTORED,
            backup_path=backup_path,
            settings_dir=settings_dir,
            message=f"Restored {settings_dir} from {backup_path.name}",
        )

    def verify_settings(self, settings_dir: Path) -> SettingsReport:
        """Check the critical files of settings_dir (no side effects)."""
        return verify_settings(settings_dir, self.profile)

    def verify_backup_integrity(
        self, source_settings_dir: Path, backup_path: Path
    ) -> bool:
        """Check that backup_path holds every critical file of the source."""
        return verify_backup_integrity(
            source_settings_dir, backup_path, self.profile
        )

    def list_backups(self, backup_root: Path) -> list[BackupInfo]:
        """List backups under backup_root, newest first.

        Entries that do not follow the backup naming scheme, or are not
        directories, are ignored. A missing root yields an empty list.
        """
        if not backup_root.is_dir():
            return []

        backups = [
            BackupInfo(
                name=entry.name,
                path=entry,
                created=parse_created(entry.name),
            )
            for entry in backup_root.iterdir()
            if is_backup_name(entry.name) and entry.is_dir()
        ]
        backups.sort(key=lambda info: sort_key(info.name), reverse=True)
        return backups

    def latest_backup(self, backup_root: Path) -> BackupInfo | None:
        """Return the newest backup, or None if there are none."""
        backups = self.list_backups(backup_root)
        return backups[0] if backups else None

    def rotate_backups(
        self, backup_root: Path, retention_limit: int
    ) -> list[Path]:
        """Delete the oldest backups, keeping retention_limit - 1.

        One slot is reserved for the backup about to be created. Deletion
        failures are logged and skipped.

        Returns:
            Paths that were actually removed

        """
        keep = max(retention_limit - 1, 0)
        stale = self.list_backups(backup_root)[keep:]

        removed = [info.path for info in stale if remove_backup(info.path)]
        if removed:
            logger.debug(
                "Rotated %d backup(s) in %s", len(removed), backup_root
            )
        return removed
