"""Version comparison for release tags and installer versions.

Versions are dotted non-negative integers with an optional lowercase
``v`` prefix (``v1.2.3``, ``1.10``). Pre-release and build suffixes are
not part of the format and are rejected rather than coerced.
"""

import re
from collections.abc import Iterable

from packaging.version import Version

from onecode_linux.exceptions import InvalidVersionError
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

_SEGMENT_RE = re.compile(r"^[0-9]+$")


def _parse(version: str) -> Version:
    """Validate a version identifier and return it as a packaging Version.

    Raises:
        InvalidVersionError: If any segment is not a non-negative integer

    """
    text = version.strip()
    if text.startswith("v"):
        text = text[1:]

    segments = text.split(".")
    for segment in segments:
        if not _SEGMENT_RE.match(segment):
            msg = f"segment {segment!r} is not a non-negative integer"
            raise InvalidVersionError(msg, target=version)

    # Release-only versions compare segment-wise with zero padding
    return Version(text)


def compare_versions(version1: str, version2: str) -> int:
    """Compare two version identifiers.

    Returns -1 if version1 < version2, 0 if equal, 1 if version1 > version2.
    Missing trailing segments count as zero, so "1.2" equals "1.2.0".

    Raises:
        InvalidVersionError: If either identifier is malformed

    """
    v1 = _parse(version1)
    v2 = _parse(version2)
    if v1 < v2:
        return -1
    if v1 > v2:
        return 1
    return 0


def is_newer(candidate: str, current: str) -> bool:
    """Return True if candidate is strictly newer than current."""
    return compare_versions(candidate, current) > 0


def pick_latest(tags: Iterable[str]) -> str | None:
    """Return the highest valid version among tags.

    Tags that are not version identifiers are skipped.

    Args:
        tags: Tag names such as "v0.0.24"

    Returns:
        Highest tag as given (prefix preserved), or None if none are valid

    """
    latest: str | None = None
    latest_version: Version | None = None
    for tag in tags:
        try:
            parsed = _parse(tag)
        except InvalidVersionError:
            logger.debug("Skipping non-version tag: %s", tag)
            continue
        if latest_version is None or parsed > latest_version:
            latest, latest_version = tag, parsed
    return latest
