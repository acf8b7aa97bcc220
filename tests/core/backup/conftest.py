"""Fixtures for backup manager tests."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from onecode_linux.core.backup import BackupManager
from onecode_linux.domain.types import SettingsProfile


class StepClock:
    """Clock returning a fixed start time advanced one second per call."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        moment = self.current
        self.current = moment + timedelta(seconds=1)
        return moment


def write_file(path: Path, size: int) -> Path:
    """Create path (and parents) with size bytes of content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def make_file():
    """Return a helper that writes a file of a given size."""
    return write_file


@pytest.fixture
def profile() -> SettingsProfile:
    """Default 1Code settings profile."""
    return SettingsProfile()


@pytest.fixture
def clock() -> StepClock:
    """Deterministic clock starting 2026-10-16 20:30:00 UTC."""
    return StepClock(datetime(2026, 10, 16, 20, 30, 0, tzinfo=UTC))


@pytest.fixture
def manager(profile: SettingsProfile, clock: StepClock) -> BackupManager:
    """BackupManager with the real copy and a deterministic clock."""
    return BackupManager(profile, clock=clock)


@pytest.fixture
def settings_dir(tmp_path: Path) -> Path:
    """Settings directory holding a 500 byte agents database."""
    settings = tmp_path / "21st-desktop"
    write_file(settings / "data" / "agents.db", 500)
    write_file(settings / "window-state.json", 42)
    return settings


@pytest.fixture
def backup_root(tmp_path: Path) -> Path:
    """Empty backup root path (not created)."""
    return tmp_path / "backups"
