"""Build the 1Code Electron application from a source checkout."""

from pathlib import Path

from onecode_linux.constants import (
    BUN_LOCKFILES,
    NATIVE_MODULES,
    SOURCE_MAP_SUPPORT_SHIM,
)
from onecode_linux.core.process import run_command
from onecode_linux.exceptions import CommandError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

# Skips the upstream postinstall electron-rebuild; rebuild runs separately
BUILD_ENV: dict[str, str] = {"VERCEL": "1"}


class BuildRunner:
    """Runs the bun build pipeline inside the source checkout."""

    def __init__(self, source_dir: Path) -> None:
        """Initialize build runner.

        Args:
            source_dir: Root of the 1Code checkout

        """
        self.source_dir = source_dir

    async def build(self) -> None:
        """Install dependencies, build and package for Linux.

        Raises:
            CommandError: If any mandatory build step fails

        """
        logger.info("🔄 Installing dependencies...")
        self.remove_lockfiles()
        await self._run("bun", "install", env=BUILD_ENV)

        logger.info("🔄 Updating dependencies to latest compatible versions")
        await self._run("bun", "update", env=BUILD_ENV)

        await self.rebuild_native_modules()

        logger.info("🔄 Downloading Claude binary...")
        await self._run("bun", "run", "claude:download")

        logger.info("🔄 Building application...")
        await self._run("bun", "run", "build")

        logger.info("📦 Packaging for Linux...")
        self.patch_source_map_support()
        await self._run("bun", "run", "package:linux")

    def remove_lockfiles(self) -> None:
        """Delete bun lockfiles to force fresh dependency resolution."""
        for name in BUN_LOCKFILES:
            (self.source_dir / name).unlink(missing_ok=True)

    async def rebuild_native_modules(self) -> bool:
        """Rebuild native modules against Electron's ABI.

        Failure is not fatal: prebuilt modules often work.

        Returns:
            True if electron-rebuild succeeded

        """
        logger.info("🔄 Rebuilding native modules for Electron...")
        command = ("npx", "electron-rebuild", "-f", "-w", NATIVE_MODULES)
        try:
            await self._run(*command)
        except CommandError as e:
            logger.debug("electron-rebuild failed: %s", e)
            logger.warning(
                "⚠️  electron-rebuild failed "
                "(this may be okay if modules were pre-built)"
            )
            logger.info("    If 1Code fails to start, run manually:")
            logger.info("    cd %s && %s", self.source_dir, " ".join(command))
            return False

        logger.info("✅ Native modules rebuilt successfully")
        return True

    def patch_source_map_support(self) -> bool:
        """Replace source-map-support with a no-op.

        Bun emits source maps with column -1, which crashes
        electron-builder when source-map-support is installed.

        Returns:
            True if the module was present and patched

        """
        module_dir = self.source_dir / "node_modules" / "source-map-support"
        if not module_dir.is_dir():
            return False
        (module_dir / "source-map-support.js").write_text(
            SOURCE_MAP_SUPPORT_SHIM, encoding="utf-8"
        )
        return True

    async def _run(
        self, *args: str, env: dict[str, str] | None = None
    ) -> None:
        await run_command(*args, cwd=self.source_dir, env=env)
