"""Tests for the CLI runner."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from onecode_linux import __version__
from onecode_linux.cli.runner import CLIRunner
from onecode_linux.config import ConfigManager
from onecode_linux.exceptions import UpdateError


@pytest.fixture
def runner(tmp_path: Path) -> CLIRunner:
    """Runner reading configuration from tmp_path."""
    return CLIRunner(ConfigManager(tmp_path / "config"))


@pytest.mark.asyncio
async def test_version(
    runner: CLIRunner, capsys: pytest.CaptureFixture
) -> None:
    """--version prints the package version."""
    assert await runner.run(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __version__


@pytest.mark.asyncio
async def test_routes_to_handler(runner: CLIRunner) -> None:
    """The parsed command selects the handler."""
    execute = AsyncMock(return_value=0)
    with patch(
        "onecode_linux.cli.commands.upgrade.UpgradeHandler.execute", execute
    ):
        assert await runner.run(["upgrade", "--check-only"]) == 0

    (args,) = execute.await_args.args
    assert args.command == "upgrade"
    assert args.check_only


@pytest.mark.asyncio
async def test_errors_exit_with_one(
    runner: CLIRunner, caplog: pytest.LogCaptureFixture
) -> None:
    """Package errors are logged and give exit status 1."""
    failing = AsyncMock(side_effect=UpdateError("1Code is not installed"))
    with patch(
        "onecode_linux.cli.commands.update.UpdateHandler.execute", failing
    ):
        assert await runner.run(["update"]) == 1

    assert "1Code is not installed" in caplog.text


@pytest.mark.asyncio
async def test_verbose_restores_console_level(runner: CLIRunner) -> None:
    """--verbose lowers the console level only for the command."""
    with (
        patch(
            "onecode_linux.cli.runner.set_console_level",
            side_effect=["INFO", "DEBUG"],
        ) as set_level,
        patch(
            "onecode_linux.cli.commands.backup.BackupHandler.execute",
            AsyncMock(return_value=0),
        ),
    ):
        await runner.run(["--verbose", "backup", "list"])

    assert [c.args[0] for c in set_level.call_args_list] == ["DEBUG", "INFO"]
