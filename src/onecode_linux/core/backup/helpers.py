"""Filesystem helpers for backup operations.

- Overlay copy of a directory's entries into another directory
- Best-effort removal of backup directories
- File size lookup for settings reports
"""

import shutil
from pathlib import Path

from onecode_linux.logger import get_logger

logger = get_logger(__name__)


def copy_tree(source: Path, destination: Path) -> None:
    """Copy every entry of source into destination.

    Existing destination entries are overwritten or merged, never cleared
    first, so files absent from source survive. Symlinks are copied as
    links. Every entry is attempted; failures are collected and raised
    together at the end.

    Args:
        source: Directory whose entries are copied
        destination: Target directory, created if missing

    Raises:
        shutil.Error: If one or more entries could not be copied
        OSError: If source cannot be listed or destination created

    """
    destination.mkdir(parents=True, exist_ok=True)
    errors: list[tuple[str, str, str]] = []

    for entry in sorted(source.iterdir()):
        target = destination / entry.name
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.copytree(
                    entry, target, symlinks=True, dirs_exist_ok=True
                )
            else:
                shutil.copy2(entry, target, follow_symlinks=False)
        except shutil.Error as e:
            errors.extend(e.args[0])
        except OSError as e:
            errors.append((str(entry), str(target), str(e)))

    if errors:
        logger.debug(
            "Copy %s -> %s had %d errors", source, destination, len(errors)
        )
        raise shutil.Error(errors)


def remove_backup(backup_path: Path) -> bool:
    """Delete a backup directory, logging instead of raising on failure.

    Returns:
        True if the directory was removed

    """
    try:
        shutil.rmtree(backup_path)
    except OSError as e:
        logger.warning(
            "⚠️  Could not remove old backup %s: %s", backup_path, e
        )
        return False
    logger.info("Removed old backup: %s", backup_path.name)
    return True


def file_size(path: Path) -> int | None:
    """Return the size of path in bytes, or None if it cannot be read.

    Unreadable entries (dangling or looping symlinks, denied access) count
    as absent.
    """
    try:
        return path.stat().st_size
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return None


def describe_copy_error(error: OSError) -> str:
    """Summarize a copy failure for user-facing messages."""
    if isinstance(error, shutil.Error) and error.args:
        details = error.args[0]
        if isinstance(details, list) and details:
            first_source, _, reason = details[0]
            extra = len(details) - 1
            suffix = f" (and {extra} more)" if extra else ""
            return f"{first_source}: {reason}{suffix}"
    return str(error)
