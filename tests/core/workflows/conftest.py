"""Fixtures for install and update workflow tests."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from onecode_linux.core.backup import BackupManager
from onecode_linux.core.dependencies import DependencyReport
from onecode_linux.core.workflows import WorkflowContext
from onecode_linux.domain.types import SettingsProfile


@pytest.fixture
def global_config(tmp_path: Path) -> dict:
    """Configuration pointing every directory into tmp_path."""
    return {
        "config_version": "1.0.0",
        "max_backup": 3,
        "log_level": "INFO",
        "console_log_level": "INFO",
        "source": {
            "repo_url": "https://github.com/21st-dev/1code.git",
            "installer_repo": "owner/installer",
        },
        "network": {"timeout_seconds": 5},
        "directory": {
            "install": tmp_path / "1code",
            "bin": tmp_path / "bin",
            "settings": tmp_path / "settings",
            "backup": tmp_path / "backups",
            "logs": tmp_path / "logs",
        },
        "app": {
            "app_path": tmp_path / "opt" / "21st-desktop",
            "sandbox_path": tmp_path / "opt" / "chrome-sandbox",
        },
    }


@pytest.fixture
def prompter() -> MagicMock:
    """Prompter that accepts defaults unless a test says otherwise."""
    mock = MagicMock()
    mock.confirm.side_effect = lambda question, *, default: default
    mock.choose.side_effect = lambda question, options, *, default=0: default
    return mock


@pytest.fixture
def repository(global_config: dict) -> MagicMock:
    """Git repository mock for a clean checkout on v0.0.9."""
    repo = MagicMock()
    repo.path = global_config["directory"]["install"]
    repo.is_cloned.return_value = True
    repo.latest_remote_tag = AsyncMock(return_value="v0.0.24")
    repo.current_tag = AsyncMock(return_value="v0.0.9")
    repo.is_dirty = AsyncMock(return_value=False)
    repo.clone = AsyncMock()
    repo.fetch = AsyncMock()
    repo.stash = AsyncMock()
    repo.checkout = AsyncMock()
    return repo


@pytest.fixture
def dependencies() -> MagicMock:
    """Dependency checker reporting a complete system."""
    checker = MagicMock()
    checker.scan = AsyncMock(return_value=DependencyReport())
    checker.install_apt_packages = AsyncMock(return_value=True)
    checker.ensure_distutils = AsyncMock(return_value=True)
    return checker


@pytest.fixture
def installer(global_config: dict) -> MagicMock:
    """Deb installer mock that creates the application binary."""
    app_path = global_config["app"]["app_path"]

    async def install() -> Path:
        app_path.parent.mkdir(parents=True, exist_ok=True)
        app_path.write_text("binary")
        return Path("release/1code.deb")

    mock = MagicMock()
    mock.install = AsyncMock(side_effect=install)
    return mock


@pytest.fixture
def context(
    global_config: dict,
    prompter: MagicMock,
    repository: MagicMock,
    dependencies: MagicMock,
    installer: MagicMock,
) -> WorkflowContext:
    """Workflow context with a real BackupManager and mocked tools."""
    builder = MagicMock()
    builder.build = AsyncMock()
    return WorkflowContext(
        config=global_config,
        prompter=prompter,
        repository=repository,
        dependencies=dependencies,
        builder=builder,
        installer=installer,
        backups=BackupManager(SettingsProfile()),
    )


@pytest.fixture
def seed_settings(global_config: dict):
    """Return a helper that writes a valid settings directory."""

    def seed() -> Path:
        settings = global_config["directory"]["settings"]
        database = settings / "data" / "agents.db"
        database.parent.mkdir(parents=True, exist_ok=True)
        database.write_bytes(b"x" * 500)
        return settings

    return seed
