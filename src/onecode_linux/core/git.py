"""Git operations on the 1Code source checkout."""

from pathlib import Path

from onecode_linux.core.process import run_command
from onecode_linux.domain.version import is_newer, pick_latest
from onecode_linux.exceptions import InvalidVersionError, UpdateError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

_TAG_REF_PREFIX = "refs/tags/"
_PEELED_SUFFIX = "^{}"


def parse_remote_tags(ls_remote_output: str) -> list[str]:
    """Extract tag names from ``git ls-remote --tags`` output.

    Peeled entries (``v1.0^{}``) collapse onto their tag; order of first
    appearance is kept.
    """
    tags: list[str] = []
    for line in ls_remote_output.splitlines():
        _, _, ref = line.partition("\t")
        ref = ref.strip()
        if not ref.startswith(_TAG_REF_PREFIX):
            continue
        tag = ref[len(_TAG_REF_PREFIX) :].removesuffix(_PEELED_SUFFIX)
        if tag and tag not in tags:
            tags.append(tag)
    return tags


class GitRepository:
    """A git checkout at a fixed directory with a fixed upstream URL."""

    def __init__(self, path: Path, repo_url: str) -> None:
        """Initialize repository handle.

        Args:
            path: Checkout directory
            repo_url: Upstream clone URL

        """
        self.path = path
        self.repo_url = repo_url

    def is_cloned(self) -> bool:
        """Return True if the checkout exists."""
        return (self.path / ".git").exists()

    async def latest_remote_tag(self) -> str:
        """Return the highest version tag published upstream.

        Raises:
            UpdateError: If the remote has no version tags

        """
        result = await run_command(
            "git", "ls-remote", "--tags", self.repo_url, capture=True
        )
        latest = pick_latest(parse_remote_tags(result.stdout))
        if latest is None:
            msg = "no version tags found"
            raise UpdateError(msg, target=self.repo_url)
        return latest

    async def current_tag(self) -> str | None:
        """Return the tag HEAD is exactly on, or None."""
        result = await run_command(
            "git",
            "describe",
            "--tags",
            "--exact-match",
            cwd=self.path,
            check=False,
            capture=True,
        )
        if not result.ok:
            return None
        return result.stdout.strip() or None

    async def clone(self, tag: str) -> None:
        """Shallow-clone the repository at tag."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        await run_command(
            "git",
            "clone",
            "--depth",
            "1",
            "--branch",
            tag,
            self.repo_url,
            str(self.path),
        )

    async def fetch(self) -> None:
        """Fetch tags and the main branch from origin."""
        await run_command("git", "fetch", "--tags", cwd=self.path)
        await run_command("git", "fetch", "origin", "main", cwd=self.path)

    async def is_dirty(self) -> bool:
        """Return True if the working tree has uncommitted changes."""
        result = await run_command(
            "git",
            "diff-index",
            "--quiet",
            "HEAD",
            "--",
            cwd=self.path,
            check=False,
            capture=True,
        )
        return not result.ok

    async def stash(self, message: str) -> None:
        """Stash local changes with a message."""
        await run_command(
            "git", "stash", "push", "-m", message, cwd=self.path
        )

    async def checkout(self, tag: str) -> None:
        """Check out tag."""
        await run_command("git", "checkout", tag, cwd=self.path)


def needs_update(current: str | None, latest: str) -> bool:
    """Decide whether the checkout should move to latest.

    A checkout that is not on a tag, or on a tag that is not a version,
    always updates.
    """
    if current is None:
        return True
    if current == latest:
        return False
    try:
        return is_newer(latest, current)
    except InvalidVersionError:
        logger.debug("Current tag %s is not a version, updating", current)
        return True

