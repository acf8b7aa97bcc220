"""Async execution of external commands.

Every shell-out (git, bun, npx, dpkg, apt-get, sudo) goes through
run_command so failures surface uniformly as CommandError.
"""

import asyncio
import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from onecode_linux.exceptions import CommandError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class CommandResult:
    """Exit status and captured output of a finished command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """True if the command exited with status 0."""
        return self.returncode == 0


async def run_command(
    *args: str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
    capture: bool = False,
) -> CommandResult:
    """Run a command and wait for it to finish.

    Args:
        *args: Program and arguments
        cwd: Working directory
        env: Extra environment variables, merged over os.environ
        check: Raise CommandError on a non-zero exit status
        capture: Capture stdout/stderr instead of streaming to the terminal

    Returns:
        CommandResult with exit status and captured output

    Raises:
        CommandError: If the executable is missing, or on a non-zero exit
            status when check is True

    """
    logger.debug("Running: %s (cwd=%s)", " ".join(args), cwd)
    full_env = {**os.environ, **env} if env else None
    pipe = asyncio.subprocess.PIPE if capture else None

    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            cwd=cwd,
            env=full_env,
            stdout=pipe,
            stderr=pipe,
        )
    except FileNotFoundError as e:
        if check:
            raise CommandError(args, None) from e
        logger.debug("Executable not found: %s", args[0])
        return CommandResult(returncode=127, stderr=str(e))

    stdout, stderr = await process.communicate()
    returncode = process.returncode if process.returncode is not None else -1
    result = CommandResult(
        returncode=returncode,
        stdout=stdout.decode("utf-8", errors="replace") if stdout else "",
        stderr=stderr.decode("utf-8", errors="replace") if stderr else "",
    )

    if check and not result.ok:
        raise CommandError(args, result.returncode, result.stderr)
    return result


def has_command(name: str) -> bool:
    """Return True if name is an executable on PATH."""
    return shutil.which(name) is not None


async def has_python_module(module: str, python: str = "python3") -> bool:
    """Return True if the system python can import module."""
    result = await run_command(
        python, "-c", f"import {module}", check=False, capture=True
    )
    return result.ok


async def python_version(python: str = "python3") -> str:
    """Return the system python's version line, or "not installed"."""
    result = await run_command(python, "--version", check=False, capture=True)
    if not result.ok:
        return "not installed"
    return (result.stdout or result.stderr).strip()
