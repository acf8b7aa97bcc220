"""Update command coordinator."""

from argparse import Namespace

from onecode_linux.core.workflows import UpdateWorkflow, WorkflowStatus

from .base import BaseCommandHandler


class UpdateHandler(BaseCommandHandler):
    """Thin coordinator for the update command."""

    async def execute(self, args: Namespace) -> int:
        """Run the update workflow."""
        self._ensure_directories()
        status = await UpdateWorkflow(self._workflow_context()).run()
        return 1 if status is WorkflowStatus.UNVERIFIED else 0
