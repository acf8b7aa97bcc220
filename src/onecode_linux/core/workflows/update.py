"""Update of an existing 1Code checkout to the latest tag."""

from onecode_linux.constants import APP_NAME
from onecode_linux.core.backup import RestoreOutcome
from onecode_linux.core.git import needs_update
from onecode_linux.core.upgrade import check_for_self_update
from onecode_linux.core.workflows.common import (
    BANNER,
    WorkflowStatus,
    app_installed,
    banner,
    build_and_install,
    checkout_tag,
    ensure_dependencies,
)
from onecode_linux.core.workflows.context import WorkflowContext
from onecode_linux.core.workflows.settings import (
    guard_settings,
    recover_settings,
)
from onecode_linux.exceptions import UpdateError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)


class UpdateWorkflow:
    """Fetch, rebuild and reinstall 1Code while protecting its settings."""

    def __init__(
        self, context: WorkflowContext, *, check_installer: bool = True
    ) -> None:
        """Initialize update workflow.

        Args:
            context: Shared workflow collaborators
            check_installer: Look for a newer 1code-linux release first

        """
        self.context = context
        self.check_installer = check_installer

    async def run(self) -> WorkflowStatus:
        """Run the update.

        Returns:
            COMPLETED when the application binary exists afterwards,
            CANCELLED if the user stopped, UNVERIFIED when the binary is
            missing or a settings restore failed

        Raises:
            UpdateError: If 1Code is not installed or checkout fails
            DependencyError: If required tools are missing
            CommandError: If a git, build or install command fails

        """
        context = self.context
        repository = context.repository
        banner("1Code Linux Updater (Unofficial)")

        if not repository.is_cloned():
            msg = f"1Code is not installed. Run: {APP_NAME} install"
            raise UpdateError(msg, target=str(repository.path))

        await ensure_dependencies(context)
        if self.check_installer:
            await self._notify_installer_update()

        logger.info("🔄 Fetching latest from origin...")
        await repository.fetch()
        latest = await repository.latest_remote_tag()
        current = await repository.current_tag()
        logger.info("    Current: %s", current or "none")
        logger.info("    Latest:  %s", latest)

        if needs_update(current, latest):
            await checkout_tag(context, latest)
        else:
            logger.info("✅ Already on latest version")
            if not context.prompter.confirm("Rebuild anyway?", default=False):
                return WorkflowStatus.CANCELLED

        if not guard_settings(context):
            return WorkflowStatus.CANCELLED

        await build_and_install(context)
        restore = recover_settings(context)

        return self._report(restore)

    async def _notify_installer_update(self) -> None:
        source = self.context.config["source"]
        newer = await check_for_self_update(
            source["installer_repo"],
            self.context.config["network"]["timeout_seconds"],
        )
        if newer:
            logger.info(
                "🔄 %s %s is available. Run: %s upgrade",
                APP_NAME,
                newer,
                APP_NAME,
            )

    def _report(self, restore: RestoreOutcome | None) -> WorkflowStatus:
        logger.info(BANNER)
        if restore is not None and not restore.ok:
            logger.error("❌ Settings could not be restored")
            logger.info("  Restore manually: %s backup restore", APP_NAME)
            status = WorkflowStatus.UNVERIFIED
        elif app_installed(self.context):
            logger.info("✅ Update successful!")
            logger.info("  Launch 1Code from your application menu")
            status = WorkflowStatus.COMPLETED
        else:
            logger.error("❌ Update may have failed")
            status = WorkflowStatus.UNVERIFIED
        logger.info(BANNER)
        return status
