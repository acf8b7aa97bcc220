"""CLI argument parser for 1code-linux.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from onecode_linux.domain.types import GlobalConfig

DEFAULT_COMMAND = "install"


class CLIParser:
    """Command-line argument parser for 1code-linux."""

    def __init__(self, global_config: GlobalConfig) -> None:
        """Initialize the CLI parser with global configuration.

        Args:
            global_config: Loaded global configuration, used for
                defaults shown in help text.

        """
        self.global_config = global_config

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Running without a command means ``install``.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:]).

        Returns:
            Parsed arguments namespace.

        """
        parser = self.build_parser()
        args = parser.parse_args(argv)
        if args.command is None:
            args.command = DEFAULT_COMMAND
        return args

    def build_parser(self) -> argparse.ArgumentParser:
        """Create the main parser with global options and subcommands."""
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="1code-linux",
            description="1Code Linux installer (unofficial)",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Install 1Code (default command)
  %(prog)s
  %(prog)s install

  # Update an existing installation
  %(prog)s update
  update-1code

  # Settings backups
  %(prog)s backup create
  %(prog)s backup list
  %(prog)s backup restore
  %(prog)s backup restore backup-2026-10-16T20-30-00-123456Z
  %(prog)s backup verify

  # Upgrade the installer itself
  %(prog)s upgrade --check-only
  %(prog)s upgrade
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add options accepted before any subcommand.

        --version has no short form so it cannot collide with -v.
        """
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show 1code-linux version and exit",
        )
        parser.add_argument(
            "-y",
            "--yes",
            action="store_true",
            help="Answer yes to every confirmation prompt",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output on the console",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        subparsers.add_parser(
            "install",
            help="Install 1Code from source (default)",
        )
        subparsers.add_parser(
            "update",
            help="Update an existing installation",
        )
        self._add_backup_command(subparsers)
        self._add_upgrade_command(subparsers)

    def _add_backup_command(self, subparsers) -> None:
        """Add backup command parser with its actions.

        Args:
            subparsers: The subparsers object to add the backup command
                to.

        """
        directory = self.global_config["directory"]
        backup_parser = subparsers.add_parser(
            "backup",
            help="Manage backups of 1Code settings",
            description=(
                f"Settings: {directory['settings']}\n"
                f"Backups:  {directory['backup']} "
                f"(keeping {self.global_config['max_backup']})"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        actions = backup_parser.add_subparsers(dest="action", required=True)
        actions.add_parser("create", help="Back up settings now")
        actions.add_parser("list", help="List backups, newest first")
        restore_parser = actions.add_parser(
            "restore", help="Restore settings from a backup"
        )
        restore_parser.add_argument(
            "name",
            nargs="?",
            help="Backup name (defaults to the newest backup)",
        )
        actions.add_parser(
            "verify", help="Check settings and the newest backup"
        )

    def _add_upgrade_command(self, subparsers) -> None:
        upgrade_parser = subparsers.add_parser(
            "upgrade",
            help="Upgrade 1code-linux itself",
        )
        upgrade_parser.add_argument(
            "--check-only",
            action="store_true",
            help="Only check for a newer release",
        )
