"""Tests for .deb installation."""

import os
from pathlib import Path
from unittest.mock import AsyncMock, call, patch

import pytest

from onecode_linux.core.package import DebInstaller, find_latest_deb
from onecode_linux.core.process import CommandResult
from onecode_linux.exceptions import InstallationError

MODULE = "onecode_linux.core.package"


def _deb(release: Path, name: str, mtime: int) -> Path:
    path = release / name
    path.write_bytes(b"deb")
    os.utime(path, (mtime, mtime))
    return path


def test_find_latest_deb_by_mtime(tmp_path: Path) -> None:
    """The most recently built package is chosen."""
    _deb(tmp_path, "1code_0.0.30_amd64.deb", 2_000)
    newest = _deb(tmp_path, "1code_0.0.24_amd64.deb", 3_000)
    (tmp_path / "notes.txt").write_text("")

    assert find_latest_deb(tmp_path) == newest


def test_find_latest_deb_without_packages(tmp_path: Path) -> None:
    """An empty release directory is an installation error."""
    with pytest.raises(InstallationError, match=r"No \.deb file found"):
        find_latest_deb(tmp_path / "release")


@pytest.mark.asyncio
async def test_install_fixes_sandbox(tmp_path: Path) -> None:
    """dpkg, sandbox permissions and cache refresh run in order."""
    release = tmp_path / "release"
    release.mkdir()
    deb = _deb(release, "1code.deb", 1_000)
    sandbox = tmp_path / "chrome-sandbox"
    sandbox.write_bytes(b"")

    run = AsyncMock(return_value=CommandResult(0))
    with patch(f"{MODULE}.run_command", run):
        installed = await DebInstaller(tmp_path, sandbox).install()

    assert installed == deb
    assert run.await_args_list == [
        call("sudo", "dpkg", "-i", str(deb)),
        call("sudo", "chown", "root:root", str(sandbox)),
        call("sudo", "chmod", "4755", str(sandbox)),
        call(
            "sudo", "update-desktop-database", check=False, capture=True
        ),
        call(
            "sudo",
            "gtk-update-icon-cache",
            "-f",
            "/usr/share/icons/hicolor",
            check=False,
            capture=True,
        ),
    ]


@pytest.mark.asyncio
async def test_install_without_sandbox_and_failing_caches(
    tmp_path: Path,
) -> None:
    """A missing sandbox is skipped and cache failures are ignored."""
    release = tmp_path / "release"
    release.mkdir()
    _deb(release, "1code.deb", 1_000)

    run = AsyncMock(return_value=CommandResult(1))
    run.side_effect = [CommandResult(0), CommandResult(1), CommandResult(1)]
    with patch(f"{MODULE}.run_command", run):
        await DebInstaller(tmp_path, tmp_path / "missing-sandbox").install()

    commands = [c.args[1] for c in run.await_args_list]
    assert commands == [
        "dpkg",
        "update-desktop-database",
        "gtk-update-icon-cache",
    ]
