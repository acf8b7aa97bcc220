"""Steps shared by the install and update workflows."""

from enum import Enum

from onecode_linux.core.workflows.context import WorkflowContext
from onecode_linux.exceptions import UpdateError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

BANNER = "=" * 40


class WorkflowStatus(Enum):
    """How a workflow ended."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    UNVERIFIED = "unverified"


def banner(title: str) -> None:
    """Print a framed title."""
    logger.info(BANNER)
    logger.info("  %s", title)
    logger.info(BANNER)


async def ensure_dependencies(context: WorkflowContext) -> None:
    """Check build dependencies and offer to install missing packages.

    Raises:
        DependencyError: If a required tool is still missing afterwards

    """
    logger.info("🔄 Checking dependencies...")
    checker = context.dependencies
    report = await checker.scan()
    logger.debug("System python: %s", report.python_version)

    if report.apt_packages:
        logger.warning("⚠️  Missing system packages detected:")
        for package in report.apt_packages:
            logger.info("    - %s", package)

        if context.prompter.confirm(
            "Install missing packages with apt?", default=True
        ):
            if await checker.install_apt_packages(report.apt_packages):
                logger.info("✅ System packages installed")
                if "python3-pip" in report.apt_packages:
                    await checker.ensure_distutils()
            else:
                logger.error("❌ Failed to install some packages")
                logger.info(
                    "    Try manually: sudo apt install %s",
                    " ".join(report.apt_packages),
                )

    checker.require()
    logger.info("✅ All dependencies satisfied")


async def checkout_tag(context: WorkflowContext, tag: str) -> None:
    """Move the checkout to tag, offering to stash local changes.

    Raises:
        UpdateError: If the tree is dirty and the user declines to stash

    """
    repository = context.repository
    logger.info("🔄 Updating to %s...", tag)

    if await repository.is_dirty():
        logger.warning("⚠️  You have uncommitted changes.")
        if not context.prompter.confirm(
            "Stash changes and continue?", default=False
        ):
            msg = "uncommitted changes; commit or stash them first"
            raise UpdateError(msg, target=str(repository.path))
        await repository.stash(f"Auto-stash before update to {tag}")
        logger.info("✅ Changes stashed. Run 'git stash pop' to restore.")

    await repository.checkout(tag)


async def build_and_install(context: WorkflowContext) -> None:
    """Build the checkout and install the resulting package."""
    await context.builder.build()
    await context.installer.install()


def app_installed(context: WorkflowContext) -> bool:
    """Return True if the application binary is present."""
    return context.config["app"]["app_path"].exists()
