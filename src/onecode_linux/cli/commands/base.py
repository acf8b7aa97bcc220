"""Base command handler for 1code-linux CLI commands.

This module provides the abstract base class that all command handlers
inherit from, ensuring consistent interface and shared functionality
across commands.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from onecode_linux.config import ConfigManager
from onecode_linux.core.backup import BackupManager
from onecode_linux.core.workflows import Prompter, WorkflowContext
from onecode_linux.logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root: it creates the configuration
    manager and prompter and injects them here.
    """

    def __init__(
        self,
        config_manager: ConfigManager,
        prompter: Prompter,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            config_manager: Configuration management instance
            prompter: Source of answers to confirmation questions

        """
        self.config_manager = config_manager
        self.global_config = config_manager.load_global_config()
        self.prompter = prompter

    @abstractmethod
    async def execute(self, args: Namespace) -> int:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit status

        """

    def _ensure_directories(self) -> None:
        """Ensure required directories exist based on global config."""
        self.config_manager.ensure_directories_from_config(self.global_config)

    def _backup_manager(self) -> BackupManager:
        return BackupManager(self.config_manager.settings_profile())

    def _workflow_context(self) -> WorkflowContext:
        return WorkflowContext.from_config(
            self.global_config,
            self.prompter,
            self.config_manager.settings_profile(),
        )
