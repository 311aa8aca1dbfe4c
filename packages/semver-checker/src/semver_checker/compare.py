# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0.

Precedence is decided by major, minor and patch compared numerically, then
by pre-release identifiers. Build metadata is ignored in comparisons.

Pre-release identifiers are compared left to right:
- numeric identifiers compare by integer value
- alphanumeric identifiers compare lexically by character code
- a numeric identifier always sorts before an alphanumeric one
- a shorter sequence sorts first when all preceding identifiers are equal

Example chain:
    1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
    < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .semver import Identifiers, InvalidVersionError, Version, parse_version
from .validator import is_numeric

VersionLike = Union[str, Version]


class VersionDiff(str, Enum):
    """Most significant field in which two versions differ."""

    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"


def _as_version(version: VersionLike) -> Version:
    return Version.parse(version) if isinstance(version, str) else version


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_identifiers(a: str, b: str) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``

    Examples:
        >>> compare_identifiers("2", "11")
        -1
        >>> compare_identifiers("11", "alpha")
        -1
        >>> compare_identifiers("beta", "alpha")
        1
    """
    a_numeric = is_numeric(a)
    b_numeric = is_numeric(b)

    if a_numeric and b_numeric:
        # No leading zeros past validation, so length decides first
        if len(a) != len(b):
            return -1 if len(a) < len(b) else 1
        return _cmp(a, b)
    if a_numeric:
        # Numeric < alphanumeric per SemVer
        return -1
    if b_numeric:
        return 1
    return _cmp(a, b)


def compare_prerelease(pre1: Identifiers, pre2: Identifiers) -> int:
    """Compare two pre-release identifier sequences.

    Both sequences are assumed to be present. Whether an absent pre-release
    outranks a present one is decided by ``precedence``.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2
    """
    for p1, p2 in zip(pre1, pre2):
        result = compare_identifiers(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _cmp(len(pre1), len(pre2))


def precedence(v1: Version, v2: Version) -> Optional[int]:
    """Compare two Versions by SemVer precedence.

    Returns:
        -1, 0 or 1 for two valid Versions; None when either is invalid,
        since an invalid Version has no place in the order
    """
    if not v1.valid or not v2.valid:
        return None

    for attr in ("major", "minor", "patch"):
        result = _cmp(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    # No pre-release > any pre-release
    if not v1.prerelease and not v2.prerelease:
        return 0
    if not v1.prerelease:
        return 1
    if not v2.prerelease:
        return -1
    return compare_prerelease(v1.prerelease, v2.prerelease)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    result = precedence(v1, v2)
    if result is None:
        raise InvalidVersionError(str(v1 if not v1.valid else v2), "Cannot compare an invalid version")
    return result


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Raises:
        InvalidVersionError: If the version is invalid

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version
    if not v.valid:
        raise InvalidVersionError(str(v), "Cannot build a sort key for an invalid version")

    # Release sorts after every pre-release of the same core version.
    # Tuples compare element-wise with the shorter prefix first, matching
    # the identifier-sequence rule; (0, n) puts numbers before (1, text).
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = tuple(
            (0, int(part)) if is_numeric(part) else (1, part) for part in v.prerelease
        )
        prerelease_key = (0, parts)

    return (v.major, v.minor, v.patch, prerelease_key)


def satisfies(version: VersionLike, requirement: VersionLike) -> bool:
    """Check caret-style compatibility of ``version`` with ``requirement``.

    The version must not be lower than the requirement and must share its
    major version. Below 1.0.0 the minor version must match as well, since
    initial development releases make no stability promise.

    Examples:
        >>> satisfies("1.2.5", "1.2.0")
        True
        >>> satisfies("0.3.0", "0.2.0")
        False
    """
    v = _as_version(version)
    req = _as_version(requirement)

    if not v.valid or not req.valid:
        return False
    if v < req:
        return False
    if v.major != req.major:
        return False
    if v.major == 0 and v.minor != req.minor:
        return False
    return True


def maximum(version1: VersionLike, version2: VersionLike) -> Version:
    """Return the greater of two versions.

    An invalid operand is ignored in favour of a valid one; two invalid
    operands give the canonical invalid Version. Ties return ``version2``.
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    if not v1.valid and not v2.valid:
        return Version.invalid()
    if not v1.valid:
        return v2
    if not v2.valid:
        return v1
    return v1 if v1 > v2 else v2


def minimum(version1: VersionLike, version2: VersionLike) -> Version:
    """Return the lesser of two versions, with the rules of ``maximum``."""
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    if not v1.valid and not v2.valid:
        return Version.invalid()
    if not v1.valid:
        return v2
    if not v2.valid:
        return v1
    return v1 if v1 < v2 else v2


def is_upgrade(base: VersionLike, candidate: VersionLike) -> bool:
    """Return True if both versions are valid and ``candidate`` is newer.

    Examples:
        >>> is_upgrade("1.0.0-alpha", "1.0.0")
        True
        >>> is_upgrade("1.0.0", "1.0.0+build.2")
        False
    """
    v1 = _as_version(base)
    v2 = _as_version(candidate)
    return v1.valid and v2.valid and v2 > v1


def diff(version1: VersionLike, version2: VersionLike) -> VersionDiff:
    """Classify the most significant difference between two versions.

    Build metadata is never considered. If either version is invalid the
    result is ``VersionDiff.NONE``; callers that need to tell "identical"
    apart from "not comparable" must check validity themselves.

    Examples:
        >>> diff("1.0.0", "1.1.0")
        <VersionDiff.MINOR: 'minor'>
        >>> diff("1.0.0-rc.1", "1.0.0")
        <VersionDiff.PRERELEASE: 'prerelease'>
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    if not v1.valid or not v2.valid:
        return VersionDiff.NONE
    if v1.major != v2.major:
        return VersionDiff.MAJOR
    if v1.minor != v2.minor:
        return VersionDiff.MINOR
    if v1.patch != v2.patch:
        return VersionDiff.PATCH
    if v1.prerelease != v2.prerelease:
        return VersionDiff.PRERELEASE
    return VersionDiff.NONE
