"""CLI runner for 1code-linux.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers.
"""

from argparse import Namespace
from collections.abc import Sequence

from onecode_linux import __version__
from onecode_linux.config import ConfigManager
from onecode_linux.exceptions import OneCodeError
from onecode_linux.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)

from .commands import (
    BackupHandler,
    BaseCommandHandler,
    InstallCommandHandler,
    UpdateHandler,
    UpgradeHandler,
)
from .parser import CLIParser
from .prompts import ConsolePrompter

logger = get_logger(__name__)

HANDLERS: dict[str, type[BaseCommandHandler]] = {
    "install": InstallCommandHandler,
    "update": UpdateHandler,
    "backup": BackupHandler,
    "upgrade": UpgradeHandler,
}


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Loads configuration and applies its log levels.
        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config(self.global_config)

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Parses arguments, handles global flags and routes to the
        command handler.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Process exit status

        """
        args = CLIParser(self.global_config).parse_args(argv)

        if args.version:
            print(__version__)  # noqa: T201
            return 0

        previous_level = set_console_level("DEBUG") if args.verbose else None
        try:
            return await self._execute_command(args)
        except OneCodeError as e:
            logger.error("❌ %s", e)
            return 1
        finally:
            if previous_level is not None:
                set_console_level(previous_level)

    async def _execute_command(self, args: Namespace) -> int:
        """Execute the specified command with the appropriate handler.

        Args:
            args: Parsed command-line arguments namespace.

        """
        handler_class = HANDLERS[args.command]
        prompter = ConsolePrompter(assume_yes=args.yes)
        handler = handler_class(self.config_manager, prompter)
        return await handler.execute(args)
