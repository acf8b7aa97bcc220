"""Upgrade command coordinator.

Thin coordinator for upgrading 1code-linux itself via uv.

The upgrade command has two modes:
- Default: Perform the upgrade using uv tool install --upgrade
- --check-only: Check for a newer release without upgrading
"""

from argparse import Namespace

from onecode_linux import __version__
from onecode_linux.core.upgrade import (
    check_for_self_update,
    perform_self_update,
)
from onecode_linux.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class UpgradeHandler(BaseCommandHandler):
    """Thin coordinator for upgrade command."""

    async def execute(self, args: Namespace) -> int:
        """Execute the upgrade command."""
        source = self.global_config["source"]
        logger.info("🔍 Checking for 1code-linux updates...")
        latest = await check_for_self_update(
            source["installer_repo"],
            self.global_config["network"]["timeout_seconds"],
        )

        if latest is None:
            logger.info(
                "✨ No newer release found (current: %s).", __version__
            )
            return 0

        logger.info("Current: %s, Latest: %s", __version__, latest)
        if args.check_only:
            logger.info("✅ A newer version is available!")
            return 0

        logger.info("🚀 Upgrading 1code-linux to %s...", latest)
        # Returns only if uv could not be started
        perform_self_update(source["installer_repo"])
        logger.info("❌ Upgrade failed. Please try again or update manually.")
        return 1
