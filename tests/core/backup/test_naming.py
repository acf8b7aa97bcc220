"""Tests for backup directory naming."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from onecode_linux.core.backup.naming import (
    format_backup_name,
    is_backup_name,
    next_backup_name,
    parse_created,
    sort_key,
)

MOMENT = datetime(2026, 10, 16, 20, 30, 0, 123456, tzinfo=UTC)


def test_format_uses_utc() -> None:
    """Local times are converted to UTC before formatting."""
    local = MOMENT.astimezone(timezone(timedelta(hours=2)))
    assert format_backup_name(local) == "backup-2026-10-16T20-30-00-123456Z"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("backup-2026-10-16T20-30-00-123456Z", True),
        ("backup-2026-10-16T20-30-00-123456Z-001", True),
        ("backup-2026-10-16T20-30-00-123456Z-1234", True),
        ("backup-2026-10-16T20-30-00.123Z", False),
        ("backup-latest", False),
        ("settings-2026-10-16T20-30-00-123456Z", False),
        ("backup-2026-10-16T20-30-00-123456Z.zip", False),
        ("backup-2026-10-16T20-30-00-123456Z\n", False),
        ("backup-2026-10-16T20-30-00-123456Z/..", False),
    ],
)
def test_is_backup_name(name: str, expected: bool) -> None:  # noqa: FBT001
    """Only names produced by the naming scheme match."""
    assert is_backup_name(name) is expected


def test_next_name_without_existing_backups() -> None:
    """The first backup uses the plain timestamp."""
    assert next_backup_name(MOMENT, None) == format_backup_name(MOMENT)


def test_next_name_same_moment_adds_counter() -> None:
    """A collision reuses the stamp with a counter."""
    newest = format_backup_name(MOMENT)
    assert next_backup_name(MOMENT, newest) == f"{newest}-001"
    assert next_backup_name(MOMENT, f"{newest}-001") == f"{newest}-002"


def test_next_name_clock_stepped_backwards() -> None:
    """An earlier clock reading still yields a name that sorts last."""
    newest = format_backup_name(MOMENT)
    earlier = MOMENT - timedelta(hours=1)

    name = next_backup_name(earlier, newest)

    assert name == f"{newest}-001"
    assert sort_key(name) > sort_key(newest)


def test_sort_key_orders_counters_numerically() -> None:
    """Counters beyond the padded width still sort in order."""
    base = format_backup_name(MOMENT)
    names = [f"{base}-1000", base, f"{base}-999", f"{base}-001"]

    assert sorted(names, key=sort_key) == [
        base,
        f"{base}-001",
        f"{base}-999",
        f"{base}-1000",
    ]


def test_names_sort_chronologically() -> None:
    """Later moments always produce later names."""
    moments = [MOMENT + timedelta(microseconds=n) for n in (0, 1, 10, 10**6)]
    names = [format_backup_name(m) for m in moments]
    assert sorted(names, key=sort_key) == names


def test_parse_created_round_trip() -> None:
    """The creation time is recovered from the name."""
    assert parse_created(format_backup_name(MOMENT)) == MOMENT
    assert parse_created(format_backup_name(MOMENT) + "-003") == MOMENT


def test_parse_created_rejects_foreign_names() -> None:
    """Names outside the scheme have no creation time."""
    assert parse_created("backup-latest") is None
    assert parse_created("backup-2026-13-40T20-30-00-000000Z") is None
