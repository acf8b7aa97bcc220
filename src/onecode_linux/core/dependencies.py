"""Build dependency detection and apt installation.

1Code's native modules are compiled by node-gyp, which needs make, g++,
pkg-config and a python3 that still provides distutils (removed from the
standard library in Python 3.12; setuptools ships a replacement).
"""

from dataclasses import dataclass, field

from onecode_linux.constants import BUN_INSTALL_HINT
from onecode_linux.core.process import (
    has_command,
    has_python_module,
    python_version,
    run_command,
)
from onecode_linux.exceptions import CommandError, DependencyError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

# Required tools and the hint shown when they are missing
REQUIRED_COMMANDS: dict[str, str] = {
    "git": "git",
    "bun": BUN_INSTALL_HINT,
    "python3": "python3",
}

# Command -> apt package providing it
APT_PROVIDERS: dict[str, str] = {
    "git": "git",
    "python3": "python3",
    "make": "build-essential",
    "g++": "build-essential",
    "pkg-config": "pkg-config",
}

DISTUTILS_PACKAGES: tuple[str, ...] = ("python3-pip", "python3-setuptools")


@dataclass(slots=True)
class DependencyReport:
    """Result of scanning the system for build dependencies.

    Attributes:
        missing: Hints for required tools that are absent
        apt_packages: Deduplicated apt packages that would fix the gaps
        python_version: Version line of the system python3
        distutils_available: Whether python3 can import distutils

    """

    missing: list[str] = field(default_factory=list)
    apt_packages: list[str] = field(default_factory=list)
    python_version: str = "not installed"
    distutils_available: bool = False

    @property
    def satisfied(self) -> bool:
        """True when nothing is missing and nothing needs installing."""
        return not self.missing and not self.apt_packages


def _add_unique(items: list[str], *values: str) -> None:
    for value in values:
        if value not in items:
            items.append(value)


class DependencyChecker:
    """Detects and installs the tools needed to build 1Code."""

    async def scan(self) -> DependencyReport:
        """Inspect PATH and python3 for build dependencies."""
        report = DependencyReport()

        for command, hint in REQUIRED_COMMANDS.items():
            if not has_command(command):
                report.missing.append(hint)

        for command, package in APT_PROVIDERS.items():
            if not has_command(command):
                _add_unique(report.apt_packages, package)

        if has_command("python3"):
            report.python_version = await python_version()
            report.distutils_available = await has_python_module("distutils")
            if not report.distutils_available:
                _add_unique(report.apt_packages, *DISTUTILS_PACKAGES)

        return report

    async def install_apt_packages(self, packages: list[str]) -> bool:
        """Install packages with apt-get via sudo.

        Returns:
            True if apt-get succeeded

        """
        logger.info("    Installing: %s", ", ".join(packages))
        try:
            await run_command("sudo", "apt-get", "update", "-qq")
            await run_command("sudo", "apt-get", "install", "-y", *packages)
        except CommandError as e:
            logger.error("apt-get failed: %s", e)
            return False
        return True

    async def ensure_distutils(self) -> bool:
        """Provide distutils through a user-level setuptools install.

        On Python 3.12+ the apt setuptools package does not always shim
        distutils; setuptools from pip does.

        Returns:
            True if distutils is importable afterwards

        """
        if await has_python_module("distutils"):
            return True

        logger.info("    Installing setuptools for distutils support...")
        result = await run_command(
            "python3",
            "-m",
            "pip",
            "install",
            "--user",
            "--break-system-packages",
            "setuptools",
            check=False,
            capture=True,
        )
        if not result.ok:
            logger.warning("⚠️  pip install setuptools failed")
            return False

        if await has_python_module("distutils"):
            logger.info("✅ Python distutils now available")
            return True

        logger.warning(
            "⚠️  distutils still missing; native module builds may fail"
        )
        return False

    def require(self) -> None:
        """Raise if any required tool is still missing.

        Raises:
            DependencyError: Listing every missing tool

        """
        still_missing = [
            hint
            for command, hint in REQUIRED_COMMANDS.items()
            if not has_command(command)
        ]
        if still_missing:
            raise DependencyError(still_missing)
