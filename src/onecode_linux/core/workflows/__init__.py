"""Install and update workflows.

Public API:
    - InstallWorkflow / UpdateWorkflow: end-to-end flows
    - WorkflowContext: collaborators shared by both flows
    - Prompter: question protocol implemented by the CLI
"""

from onecode_linux.core.workflows.common import WorkflowStatus
from onecode_linux.core.workflows.context import WorkflowContext
from onecode_linux.core.workflows.install import InstallWorkflow
from onecode_linux.core.workflows.prompts import Prompter
from onecode_linux.core.workflows.update import UpdateWorkflow

__all__ = [
    "InstallWorkflow",
    "Prompter",
    "UpdateWorkflow",
    "WorkflowContext",
    "WorkflowStatus",
]
