"""Protection of 1Code's settings around a rebuild.

A snapshot is taken before the new package replaces the application; after
installation the live settings are verified and, if the critical files are
gone, the user is offered a restore.
"""

from onecode_linux.core.backup import BackupOutcome, RestoreOutcome
from onecode_linux.core.workflows.context import WorkflowContext
from onecode_linux.logger import get_logger

logger = get_logger(__name__)


def backup_settings(context: WorkflowContext) -> BackupOutcome:
    """Snapshot the settings directory with the configured retention."""
    directory = context.config["directory"]
    logger.info("🔄 Backing up 1Code settings...")
    outcome = context.backups.create_backup(
        directory["settings"],
        directory["backup"],
        context.config["max_backup"],
    )
    if outcome.ok and outcome.path is not None:
        logger.info("✅ Settings backed up to %s", outcome.path)
    elif outcome.ok:
        logger.info("    No existing settings to back up")
    else:
        logger.warning("⚠️  Settings backup failed: %s", outcome.message)
    return outcome


def guard_settings(context: WorkflowContext) -> bool:
    """Back up settings before a rebuild.

    Returns:
        False if the backup failed and the user chose to stop

    """
    outcome = backup_settings(context)
    if outcome.ok:
        return True
    return context.prompter.confirm(
        "Continue without a settings backup?", default=True
    )


def recover_settings(context: WorkflowContext) -> RestoreOutcome | None:
    """Verify settings after installation and offer a restore if needed.

    Returns:
        The restore outcome, or None if no restore was attempted

    """
    directory = context.config["directory"]
    manager = context.backups

    report = manager.verify_settings(directory["settings"])
    if report.ok:
        logger.info("✅ Settings intact")
        return None

    logger.warning(
        "⚠️  Settings missing after update: %s", ", ".join(report.missing)
    )
    backups = manager.list_backups(directory["backup"])
    if not backups:
        logger.warning("⚠️  No backups available to restore from")
        return None

    choice = context.prompter.choose(
        "Restore settings from which backup?",
        [info.name for info in backups],
        default=0,
    )
    selected = backups[choice]
    logger.info("🔄 Restoring settings from %s...", selected.name)
    outcome = manager.restore_backup(selected.path, directory["settings"])
    if outcome.ok:
        logger.info("✅ %s", outcome.message)
    else:
        logger.error("❌ %s", outcome.message)
    return outcome
