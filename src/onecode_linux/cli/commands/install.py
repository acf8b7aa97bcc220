"""Install command coordinator."""

from argparse import Namespace

from onecode_linux.core.workflows import InstallWorkflow, WorkflowStatus

from .base import BaseCommandHandler


class InstallCommandHandler(BaseCommandHandler):
    """Thin coordinator for the install command."""

    async def execute(self, args: Namespace) -> int:
        """Run the install workflow."""
        self._ensure_directories()
        status = await InstallWorkflow(self._workflow_context()).run()
        return 1 if status is WorkflowStatus.UNVERIFIED else 0
