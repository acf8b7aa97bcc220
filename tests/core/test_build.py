"""Tests for the bun build pipeline."""

from pathlib import Path
from unittest.mock import AsyncMock, call, patch

import pytest

from onecode_linux.constants import SOURCE_MAP_SUPPORT_SHIM
from onecode_linux.core.build import BuildRunner
from onecode_linux.core.process import CommandResult
from onecode_linux.exceptions import CommandError

MODULE = "onecode_linux.core.build"
REBUILD = ("npx", "electron-rebuild", "-f", "-w", "better-sqlite3,node-pty")


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Checkout with stale lockfiles and source-map-support installed."""
    source = tmp_path / "1code"
    (source / "node_modules" / "source-map-support").mkdir(parents=True)
    (source / "bun.lock").write_text("{}")
    (source / "bun.lockb").write_bytes(b"\0")
    return source


@pytest.mark.asyncio
async def test_build_runs_steps_in_order(source_dir: Path) -> None:
    """The pipeline runs every step inside the checkout."""
    run = AsyncMock(return_value=CommandResult(0))
    with patch(f"{MODULE}.run_command", run):
        await BuildRunner(source_dir).build()

    env = {"VERCEL": "1"}
    assert run.await_args_list == [
        call("bun", "install", cwd=source_dir, env=env),
        call("bun", "update", cwd=source_dir, env=env),
        call(*REBUILD, cwd=source_dir, env=None),
        call("bun", "run", "claude:download", cwd=source_dir, env=None),
        call("bun", "run", "build", cwd=source_dir, env=None),
        call("bun", "run", "package:linux", cwd=source_dir, env=None),
    ]
    assert not (source_dir / "bun.lock").exists()
    assert not (source_dir / "bun.lockb").exists()
    shim = source_dir / "node_modules/source-map-support/source-map-support.js"
    assert shim.read_text() == SOURCE_MAP_SUPPORT_SHIM


@pytest.mark.asyncio
async def test_rebuild_failure_is_not_fatal(
    source_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """electron-rebuild failing only warns with the manual command."""

    async def fake_run(*args, **kwargs):
        if args[0] == "npx":
            raise CommandError(args, 1)
        return CommandResult(0)

    with patch(f"{MODULE}.run_command", side_effect=fake_run) as run:
        await BuildRunner(source_dir).build()

    assert run.await_args_list[-1].args == ("bun", "run", "package:linux")
    assert "electron-rebuild failed" in caplog.text
    assert " ".join(REBUILD) in caplog.text


@pytest.mark.asyncio
async def test_mandatory_step_failure_propagates(source_dir: Path) -> None:
    """A failing bun step stops the build."""
    run = AsyncMock(side_effect=CommandError(["bun", "install"], 1))
    with (
        patch(f"{MODULE}.run_command", run),
        pytest.raises(CommandError),
    ):
        await BuildRunner(source_dir).build()

    run.assert_awaited_once()


def test_patch_source_map_support_skips_missing_module(
    tmp_path: Path,
) -> None:
    """Without the module nothing is written."""
    runner = BuildRunner(tmp_path)
    assert not runner.patch_source_map_support()
    assert not (tmp_path / "node_modules").exists()


def test_remove_lockfiles_without_lockfiles(tmp_path: Path) -> None:
    """Absent lockfiles are fine."""
    BuildRunner(tmp_path).remove_lockfiles()
