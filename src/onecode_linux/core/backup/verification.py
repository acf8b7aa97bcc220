"""Settings verification.

A settings directory is valid when every critical file of the profile
exists. Informational files are reported with their sizes but never
affect validity.
"""

from pathlib import Path

from onecode_linux.core.backup.helpers import file_size
from onecode_linux.core.backup.results import FileStatus, SettingsReport
from onecode_linux.domain.types import SettingsProfile


def verify_settings(
    settings_dir: Path, profile: SettingsProfile
) -> SettingsReport:
    """Inspect settings_dir for the profile's files.

    Pure inspection: nothing is created or modified.

    Args:
        settings_dir: Settings directory to inspect
        profile: Critical and informational file set

    Returns:
        Report with the missing critical files and per-file sizes

    """
    files: list[FileStatus] = []
    missing: list[str] = []

    for relative in profile.critical_files:
        size = file_size(settings_dir / relative)
        files.append(FileStatus(relative, critical=True, size=size))
        if size is None:
            missing.append(relative)

    for relative in profile.informational_files:
        size = file_size(settings_dir / relative)
        files.append(FileStatus(relative, critical=False, size=size))

    return SettingsReport(
        settings_dir=settings_dir,
        missing=tuple(missing),
        files=tuple(files),
    )


def missing_from_backup(
    source_settings_dir: Path,
    backup_path: Path,
    profile: SettingsProfile,
) -> tuple[str, ...]:
    """List critical files present in the source but absent from the backup.

    Critical files the source never had are not required in the backup.
    """
    return tuple(
        relative
        for relative in profile.critical_files
        if file_size(source_settings_dir / relative) is not None
        and file_size(backup_path / relative) is None
    )


def verify_backup_integrity(
    source_settings_dir: Path,
    backup_path: Path,
    profile: SettingsProfile,
) -> bool:
    """Return True if the backup holds every critical file the source has."""
    return not missing_from_backup(source_settings_dir, backup_path, profile)
