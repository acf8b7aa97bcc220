"""Main CLI entry point for the 1code-linux installer.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to specialized command
handlers and CLI components.
"""

import sys

import uvloop

from onecode_linux.cli import CLIRunner
from onecode_linux.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


async def async_main() -> int:
    """Run the CLI asynchronously and return its exit status."""
    logger.debug("CLI started")
    runner = CLIRunner()
    try:
        code = await runner.run()
    except Exception:
        logger.exception("CLI encountered an error")
        raise
    logger.debug("CLI finished with status %s", code)
    return code


def main() -> None:
    """Run the CLI application on uvloop.

    Exits with status 1 on cancellation or any unexpected error.
    """
    try:
        code = uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("\n⏹️  Operation cancelled by user")
        code = 1
    except Exception as e:  # noqa: BLE001
        logger.error("❌ Unexpected error: %s", e)
        code = 1
    flush_all_handlers()
    sys.exit(code)


if __name__ == "__main__":
    main()
