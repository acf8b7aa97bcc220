"""Tests for version comparison."""

import pytest

from onecode_linux.domain.version import (
    compare_versions,
    is_newer,
    pick_latest,
)
from onecode_linux.exceptions import InvalidVersionError, OneCodeError


@pytest.mark.parametrize(
    ("version1", "version2", "expected"),
    [
        ("1.2.3", "1.2.3", 0),
        ("1.10.0", "1.9.9", 1),
        ("1.9.9", "1.10.0", -1),
        ("v2.0", "2.0.0", 0),
        ("1.2", "1.2.0", 0),
        ("0.0.24", "v0.0.3", 1),
        ("v1", "1.0.1", -1),
        ("010.0", "10", 0),
    ],
)
def test_compare_versions(version1: str, version2: str, expected: int) -> None:
    """Versions compare numerically segment by segment."""
    assert compare_versions(version1, version2) == expected


def test_compare_versions_is_antisymmetric() -> None:
    """Swapping operands negates the result."""
    pairs = [("1.0", "1.0.1"), ("2.3.4", "2.3.4"), ("v5", "4.99")]
    for a, b in pairs:
        assert compare_versions(a, b) == -compare_versions(b, a)


@pytest.mark.parametrize(
    "bad",
    ["", "v", "1..2", "1.2-beta", "1.2.x", "V1.0", "-1.0", "١.٢"],
)
def test_invalid_versions_raise(bad: str) -> None:
    """Malformed identifiers are rejected, not coerced."""
    with pytest.raises(InvalidVersionError) as excinfo:
        compare_versions(bad, "1.0")
    assert excinfo.value.target == bad


def test_surrounding_whitespace_is_ignored() -> None:
    """Whitespace around an identifier is stripped."""
    assert compare_versions(" v1.0 ", "1.0") == 0


def test_invalid_version_error_types() -> None:
    """The error is both a package error and a ValueError."""
    with pytest.raises(InvalidVersionError) as excinfo:
        compare_versions("1.0", "nope")
    assert isinstance(excinfo.value, OneCodeError)
    assert isinstance(excinfo.value, ValueError)
    assert "nope" in str(excinfo.value)


def test_is_newer() -> None:
    """Only strictly higher versions are newer."""
    assert is_newer("v0.0.25", "v0.0.24")
    assert not is_newer("v0.0.24", "0.0.24")
    assert not is_newer("0.0.9", "0.0.24")


def test_pick_latest_keeps_original_tag() -> None:
    """The highest tag is returned as written."""
    tags = ["v0.0.9", "v0.0.24", "nightly", "v0.0.3", "release-candidate"]
    assert pick_latest(tags) == "v0.0.24"


def test_pick_latest_skips_leading_invalid_tag() -> None:
    """An invalid first tag never wins."""
    assert pick_latest(["latest", "v1.0"]) == "v1.0"


def test_pick_latest_without_versions() -> None:
    """No version tags gives None."""
    assert pick_latest([]) is None
    assert pick_latest(["main", "stable"]) is None
