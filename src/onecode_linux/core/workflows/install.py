"""First-time installation (or reinstall) of 1Code from source."""

from onecode_linux.constants import UPDATE_COMMAND_NAME
from onecode_linux.core.update_command import (
    PATH_HINT,
    bin_dir_on_path,
    install_update_command,
)
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
from onecode_linux.core.workflows.settings import backup_settings
from onecode_linux.logger import get_logger

logger = get_logger(__name__)


class InstallWorkflow:
    """Clone, build and install the latest tagged 1Code release."""

    def __init__(self, context: WorkflowContext) -> None:
        """Initialize install workflow.

        Args:
            context: Shared workflow collaborators

        """
        self.context = context

    async def run(self) -> WorkflowStatus:
        """Run the installation.

        Returns:
            COMPLETED when the application binary exists afterwards,
            CANCELLED if the user declined a reinstall, UNVERIFIED otherwise

        Raises:
            DependencyError: If required tools are missing
            UpdateError: If the tag cannot be resolved or checked out
            CommandError: If a build or install command fails

        """
        context = self.context
        repository = context.repository
        banner("1Code Linux Installer (Unofficial)")

        await ensure_dependencies(context)

        reinstall = repository.is_cloned()
        if reinstall:
            logger.warning(
                "⚠️  Existing installation found. "
                "Use 'update' command instead."
            )
            if not context.prompter.confirm(
                "Continue with reinstall?", default=False
            ):
                return WorkflowStatus.CANCELLED

        latest = await repository.latest_remote_tag()
        logger.info("    Latest version: %s", latest)

        if reinstall:
            await repository.fetch()
            await checkout_tag(context, latest)
            backup_settings(context)
        else:
            logger.info("🔄 Cloning 1code repository (%s)...", latest)
            await repository.clone(latest)

        await build_and_install(context)
        install_update_command(context.config["directory"]["bin"])

        return self._report()

    def _report(self) -> WorkflowStatus:
        logger.info(BANNER)
        if not app_installed(self.context):
            logger.error("❌ Installation may have failed")
            logger.info("  Try running: sudo dpkg -i release/*.deb")
            logger.info(BANNER)
            return WorkflowStatus.UNVERIFIED

        logger.info("✅ Installation successful!")
        logger.info("  Launch: 1Code from application menu")
        logger.info("  Update: %s", UPDATE_COMMAND_NAME)

        bin_dir = self.context.config["directory"]["bin"]
        if not bin_dir_on_path(bin_dir):
            logger.warning("⚠️  Add %s to your PATH:", bin_dir)
            logger.info("    %s", PATH_HINT)
        logger.info(BANNER)
        return WorkflowStatus.COMPLETED
