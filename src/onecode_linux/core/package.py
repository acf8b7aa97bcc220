"""Installation of the built .deb package."""

from pathlib import Path

from onecode_linux.core.process import run_command
from onecode_linux.exceptions import InstallationError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

ICON_THEME_DIR = "/usr/share/icons/hicolor"


def find_latest_deb(release_dir: Path) -> Path:
    """Return the most recently modified .deb in release_dir.

    Raises:
        InstallationError: If no .deb file exists

    """
    debs = sorted(
        (path for path in release_dir.glob("*.deb") if path.is_file()),
        key=lambda path: path.stat().st_mtime,
        reverse=True,
    )
    if not debs:
        msg = "No .deb file found"
        raise InstallationError(msg, target=str(release_dir))
    return debs[0]


class DebInstaller:
    """Installs the packaged application system-wide with dpkg."""

    def __init__(self, source_dir: Path, sandbox_path: Path) -> None:
        """Initialize deb installer.

        Args:
            source_dir: Root of the 1Code checkout (holds release/)
            sandbox_path: Electron chrome-sandbox installed by the package

        """
        self.source_dir = source_dir
        self.sandbox_path = sandbox_path

    async def install(self) -> Path:
        """Install the newest built package and fix up permissions.

        Returns:
            Path of the installed .deb

        Raises:
            InstallationError: If no package was built
            CommandError: If dpkg or the sandbox fix-up fails

        """
        deb = find_latest_deb(self.source_dir / "release")

        logger.info("📦 Installing %s...", deb.name)
        logger.info("    (requires sudo password)")
        await run_command("sudo", "dpkg", "-i", str(deb))

        await self.fix_sandbox_permissions()
        await self.refresh_desktop_caches()
        return deb

    async def fix_sandbox_permissions(self) -> bool:
        """Make chrome-sandbox setuid root, as Electron requires."""
        if not self.sandbox_path.exists():
            return False
        logger.info("🔄 Fixing Electron sandbox permissions...")
        sandbox = str(self.sandbox_path)
        await run_command("sudo", "chown", "root:root", sandbox)
        await run_command("sudo", "chmod", "4755", sandbox)
        return True

    async def refresh_desktop_caches(self) -> None:
        """Refresh desktop entries and icons; failures are ignored."""
        logger.info("🔄 Updating desktop database...")
        for command in (
            ("sudo", "update-desktop-database"),
            ("sudo", "gtk-update-icon-cache", "-f", ICON_THEME_DIR),
        ):
            result = await run_command(*command, check=False, capture=True)
            if not result.ok:
                logger.debug(
                    "%s exited with %s", command[1], result.returncode
                )
