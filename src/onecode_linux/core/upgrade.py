"""Self-upgrade of the 1code-linux installer.

Checks the installer's GitHub releases for a newer version and replaces the
running process with ``uv tool install --upgrade`` from the repository.
"""

import os
import shutil
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp
import orjson

from onecode_linux import __version__
from onecode_linux.constants import (
    DEFAULT_INSTALLER_REPO,
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_API_BASE,
    GITHUB_BASE_URL,
)
from onecode_linux.domain.version import is_newer
from onecode_linux.exceptions import InvalidVersionError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

DEV_VERSION = "dev"


@asynccontextmanager
async def create_http_session(
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create an HTTP session for GitHub API requests.

    Args:
        timeout_seconds: Connect timeout; reads get three times as long

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout = aiohttp.ClientTimeout(
        total=timeout_seconds * 6,
        sock_read=timeout_seconds * 3,
        sock_connect=timeout_seconds,
    )
    headers = {"Accept": "application/vnd.github+json"}
    async with aiohttp.ClientSession(
        timeout=timeout, headers=headers
    ) as session:
        yield session


def installer_url(installer_repo: str = DEFAULT_INSTALLER_REPO) -> str:
    """Return the installer's GitHub URL."""
    return f"{GITHUB_BASE_URL}/{installer_repo}"


async def fetch_latest_release_tag(
    session: aiohttp.ClientSession,
    installer_repo: str = DEFAULT_INSTALLER_REPO,
) -> str | None:
    """Return the tag of the installer's latest release, or None."""
    url = f"{GITHUB_API_BASE}/repos/{installer_repo}/releases/latest"
    try:
        async with session.get(url) as response:
            response.raise_for_status()
            payload = orjson.loads(await response.read())
    except (aiohttp.ClientError, TimeoutError, orjson.JSONDecodeError) as e:
        logger.debug("Unable to fetch latest release of %s: %s", url, e)
        return None

    tag = payload.get("tag_name") if isinstance(payload, dict) else None
    if not isinstance(tag, str) or not tag.strip():
        logger.debug("Release payload from %s has no tag_name", url)
        return None
    return tag.strip()


async def check_for_self_update(
    installer_repo: str = DEFAULT_INSTALLER_REPO,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    current_version: str = __version__,
) -> str | None:
    """Return the newer installer version, if one is published.

    The check is advisory: network and parse problems give None.
    A development build is never reported as outdated.
    """
    if current_version == DEV_VERSION:
        return None

    async with create_http_session(timeout_seconds) as session:
        latest = await fetch_latest_release_tag(session, installer_repo)

    if latest is None:
        return None
    try:
        return latest if is_newer(latest, current_version) else None
    except InvalidVersionError as e:
        logger.debug("Cannot compare installer versions: %s", e)
        return None


def perform_self_update(installer_repo: str = DEFAULT_INSTALLER_REPO) -> bool:
    """Reinstall 1code-linux from git with uv.

    Uses os.execvp so the upgrade completes after this process is gone.

    Returns:
        False if the upgrade could not be started.
        Does not return on success (process replaced by execvp).

    """
    url = installer_url(installer_repo)
    uv_executable = shutil.which("uv") or "uv"
    logger.debug("Executing: uv tool install --upgrade git+%s", url)

    try:
        os.execvp(  # noqa: S606
            uv_executable,
            [uv_executable, "tool", "install", "--upgrade", f"git+{url}"],
        )
    except OSError as e:
        logger.exception("Upgrade failed")
        logger.info("❌ Upgrade failed: %s", e)
        return False

    logger.error("Failed to execute uv upgrade")
    return False
