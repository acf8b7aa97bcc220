"""Backup directory naming.

Backups are named ``backup-<UTC timestamp>`` with colons and dots replaced
by dashes, e.g. ``backup-2026-10-16T20-30-00-123456Z``. When a timestamp
would not sort after the newest existing backup (same microsecond, or the
clock stepped backwards) the newest stamp is reused with a counter suffix,
``backup-2026-10-16T20-30-00-123456Z-001``, so names stay unique and
ordered.
"""

import re
from datetime import UTC, datetime

from onecode_linux.constants import (
    BACKUP_COUNTER_WIDTH,
    BACKUP_NAME_PATTERN,
    BACKUP_PREFIX,
    BACKUP_TIMESTAMP_FORMAT,
)

BACKUP_NAME_RE = re.compile(BACKUP_NAME_PATTERN)


def is_backup_name(name: str) -> bool:
    """Return True if name follows the backup naming scheme."""
    return BACKUP_NAME_RE.fullmatch(name) is not None


def sort_key(name: str) -> tuple[str, int]:
    """Chronological sort key for a backup name.

    Equivalent to lexicographic order, but keeps counters past the padded
    width in numeric order.
    """
    match = BACKUP_NAME_RE.match(name)
    if match is None:
        return (name, 0)
    return (match["stamp"], int(match["counter"] or 0))


def format_backup_name(moment: datetime) -> str:
    """Render a backup name for the given moment (converted to UTC)."""
    stamp = moment.astimezone(UTC).strftime(BACKUP_TIMESTAMP_FORMAT)
    return f"{BACKUP_PREFIX}{stamp}"


def next_backup_name(moment: datetime, newest: str | None) -> str:
    """Return a backup name that sorts after ``newest``.

    Args:
        moment: Current time from the injected clock
        newest: Name of the newest existing backup, if any

    Returns:
        New unique backup name

    """
    candidate = format_backup_name(moment)
    if newest is None or sort_key(candidate) > sort_key(newest):
        return candidate

    match = BACKUP_NAME_RE.match(newest)
    if match is None:
        return candidate
    counter = int(match["counter"] or 0) + 1
    return (
        f"{BACKUP_PREFIX}{match['stamp']}-"
        f"{counter:0{BACKUP_COUNTER_WIDTH}d}"
    )


def parse_created(name: str) -> datetime | None:
    """Extract the creation time encoded in a backup name.

    Returns:
        Timezone-aware UTC datetime, or None if the name does not parse

    """
    match = BACKUP_NAME_RE.match(name)
    if match is None:
        return None
    try:
        created = datetime.strptime(match["stamp"], BACKUP_TIMESTAMP_FORMAT)
    except ValueError:
        return None
    return created.replace(tzinfo=UTC)
