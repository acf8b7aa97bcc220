"""Backup command coordinator.

Thin coordinator that delegates to BackupManager and displays results.
"""

from argparse import Namespace

from onecode_linux.core.backup import BackupManager
from onecode_linux.core.backup.naming import is_backup_name
from onecode_linux.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class BackupHandler(BaseCommandHandler):
    """Thin coordinator for backup command."""

    async def execute(self, args: Namespace) -> int:
        """Execute the backup command."""
        self._ensure_directories()
        manager = self._backup_manager()

        # Route to appropriate handler
        if args.action == "create":
            return self._create_backup(manager)
        if args.action == "list":
            return self._list_backups(manager)
        if args.action == "restore":
            return self._restore_backup(manager, args.name)
        return self._verify(manager)

    def _create_backup(self, manager: BackupManager) -> int:
        directory = self.global_config["directory"]
        logger.info("Creating backup of %s...", directory["settings"])
        outcome = manager.create_backup(
            directory["settings"],
            directory["backup"],
            self.global_config["max_backup"],
        )
        if not outcome.ok:
            logger.error("❌ %s", outcome.message)
            return 1
        if outcome.path is None:
            logger.info("⚠️  %s", outcome.message)
        else:
            logger.info("✅ Successfully created backup")
            logger.info("Backup saved to: %s", outcome.path)
        return 0

    def _list_backups(self, manager: BackupManager) -> int:
        backup_root = self.global_config["directory"]["backup"]
        backups = manager.list_backups(backup_root)
        if not backups:
            logger.info("No backups found in %s", backup_root)
            return 0

        logger.info("📦 Backups in %s (newest first):", backup_root)
        for info in backups:
            created = (
                info.created.astimezone().strftime("%Y-%m-%d %H:%M:%S")
                if info.created
                else "unknown"
            )
            logger.info("  %s  (%s)", info.name, created)
        return 0

    def _restore_backup(
        self, manager: BackupManager, name: str | None
    ) -> int:
        """Restore a named backup, or the newest one."""
        directory = self.global_config["directory"]

        if name is None:
            latest = manager.latest_backup(directory["backup"])
            if latest is None:
                logger.error("❌ No backups found in %s", directory["backup"])
                return 1
            backup_path = latest.path
        elif is_backup_name(name):
            backup_path = directory["backup"] / name
        else:
            # Only direct children of the backup root can be restored
            logger.error("❌ Not a backup name: %s", name)
            return 1

        logger.info("🔄 Restoring settings from %s...", backup_path.name)
        outcome = manager.restore_backup(backup_path, directory["settings"])
        if not outcome.ok:
            logger.error("❌ %s", outcome.message)
            return 1

        logger.info("✅ %s", outcome.message)
        return 0

    def _verify(self, manager: BackupManager) -> int:
        """Report settings files and check the newest backup against them."""
        directory = self.global_config["directory"]
        report = manager.verify_settings(directory["settings"])

        logger.info("Settings: %s", report.settings_dir)
        for status in report.files:
            kind = "critical" if status.critical else "info"
            if status.exists:
                logger.info(
                    "  ✅ %s [%s] %d bytes",
                    status.relative_path,
                    kind,
                    status.size,
                )
            elif status.critical:
                logger.info(
                    "  ❌ %s [%s] missing", status.relative_path, kind
                )
            else:
                logger.info(
                    "  ⚠️  %s [%s] missing", status.relative_path, kind
                )

        exit_code = 0 if report.ok else 1
        latest = manager.latest_backup(directory["backup"])
        if latest is None:
            logger.info("No backups found in %s", directory["backup"])
        elif manager.verify_backup_integrity(
            directory["settings"], latest.path
        ):
            logger.info("✅ Newest backup %s is complete", latest.name)
        else:
            logger.error(
                "❌ Newest backup %s lacks critical files", latest.name
            )
            exit_code = 1
        return exit_code
