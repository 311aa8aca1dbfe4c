# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Parsing never raises on malformed input. A string that is not a semantic
version produces the canonical invalid Version (0.0.0, no identifiers,
``valid=False``); ``parse_version`` is the raising variant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .config import DEFAULT_MAX_LENGTH, UINT32_MAX
from .segmenter import split_segments
from .validator import check_identifiers, parse_build, parse_core, parse_prerelease

if TYPE_CHECKING:
    from .compare import VersionDiff

logger = logging.getLogger(__name__)

# Rendered form of an invalid Version
INVALID_VERSION_TEXT = "invalid"

Identifiers = tuple[str, ...]


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


def _as_identifiers(value: Union[str, Identifiers, None]) -> Identifiers:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split(".")) if value else ()
    return tuple(value)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, e.g. ``("alpha", "1")``
        build: Build metadata identifiers, e.g. ``("build", "123")``
        valid: False for the result of a failed parse

    Equality and ordering follow SemVer precedence: build metadata is
    ignored, and an invalid Version is neither equal to nor ordered against
    anything, itself included.
    """

    major: int
    minor: int
    patch: int
    prerelease: Identifiers = ()
    build: Identifiers = ()
    valid: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "prerelease", _as_identifiers(self.prerelease))
        object.__setattr__(self, "build", _as_identifiers(self.build))

        if not self.valid:
            if (self.major, self.minor, self.patch, self.prerelease, self.build) != (0, 0, 0, (), ()):
                raise ValueError("An invalid Version must be 0.0.0 without identifiers")
            return

        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= UINT32_MAX:
                raise ValueError(f"{name} must be between 0 and {UINT32_MAX}, got {value}")

        if not check_identifiers(self.prerelease):
            raise ValueError(f"Invalid pre-release identifiers: {self.prerelease!r}")
        if not check_identifiers(self.build, build=True):
            raise ValueError(f"Invalid build metadata identifiers: {self.build!r}")

    @classmethod
    def invalid(cls) -> "Version":
        """Return the canonical invalid Version."""
        return cls(0, 0, 0, valid=False)

    @classmethod
    def parse(cls, text: str, max_length: int = DEFAULT_MAX_LENGTH) -> "Version":
        """Parse ``text`` into a Version.

        Fields are committed only after every check has passed; any failure
        yields the canonical invalid Version instead of raising.

        Args:
            text: Candidate version string
            max_length: Longest input accepted

        Examples:
            >>> Version.parse("1.0.0-alpha.1+build.5")
            Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=('build', '5'), valid=True)
            >>> Version.parse("1.0").valid
            False
        """
        if not isinstance(text, str):
            logger.debug("Rejected non-string version %r", text)
            return cls.invalid()

        segments = split_segments(text, max_length)
        if segments is None:
            return cls.invalid()

        core = parse_core(text, segments)
        if core is None:
            return cls.invalid()

        prerelease: Optional[Identifiers] = ()
        if segments.prerelease is not None:
            prerelease = parse_prerelease(text, segments.prerelease)
            if prerelease is None:
                return cls.invalid()

        build: Optional[Identifiers] = ()
        if segments.build is not None:
            build = parse_build(text, segments.build)
            if build is None:
                return cls.invalid()

        major, minor, patch = core
        return cls(major, minor, patch, prerelease, build)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        if not self.valid:
            return INVALID_VERSION_TEXT
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease_text}"
        if self.build:
            version += f"+{self.build_text}"
        return version

    @property
    def prerelease_text(self) -> str:
        """Return the pre-release identifiers joined by dots ("" if none)."""
        return ".".join(self.prerelease)

    @property
    def build_text(self) -> str:
        """Return the build metadata identifiers joined by dots ("" if none)."""
        return ".".join(self.build)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import precedence

        return precedence(self, other) == 0

    def __hash__(self) -> int:
        if not self.valid:
            return hash(INVALID_VERSION_TEXT)
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import precedence

        result = precedence(self, other)
        return result is not None and result < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import precedence

        result = precedence(self, other)
        return result is not None and result <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import precedence

        result = precedence(self, other)
        return result is not None and result > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import precedence

        result = precedence(self, other)
        return result is not None and result >= 0

    def diff(self, other: "Version") -> "VersionDiff":
        """Return the most significant field that differs from ``other``."""
        from .compare import diff

        return diff(self, other)

    def satisfies(self, requirement: Union[str, "Version"]) -> bool:
        """Return True if this version is caret-compatible with ``requirement``."""
        from .compare import satisfies

        return satisfies(self, requirement)

    def inc_major(self) -> "Version":
        """Return the next major version (``1.2.3-rc`` -> ``2.0.0``).

        An invalid Version, or one whose major is already UINT32_MAX,
        increments to the canonical invalid Version.
        """
        if not self.valid or self.major >= UINT32_MAX:
            return Version.invalid()
        return Version(self.major + 1, 0, 0)

    def inc_minor(self) -> "Version":
        """Return the next minor version (``1.2.3-rc`` -> ``1.3.0``)."""
        if not self.valid or self.minor >= UINT32_MAX:
            return Version.invalid()
        return Version(self.major, self.minor + 1, 0)

    def inc_patch(self) -> "Version":
        """Return the next patch version (``1.2.3-rc`` -> ``1.2.4``)."""
        if not self.valid or self.patch >= UINT32_MAX:
            return Version.invalid()
        return Version(self.major, self.minor, self.patch + 1)


def parse_version(version_string: str, max_length: int = DEFAULT_MAX_LENGTH) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        max_length: Longest input accepted

    Returns:
        A valid Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=(), valid=True)

        >>> str(parse_version("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")
    if len(version_string) > max_length:
        raise InvalidVersionError(
            version_string, f"Version string exceeds {max_length} characters"
        )

    version = Version.parse(version_string, max_length)
    if not version.valid:
        raise InvalidVersionError(version_string)
    return version


def is_valid_semver(version_string: str, max_length: int = DEFAULT_MAX_LENGTH) -> bool:
    """Check if a string is a valid semantic version.

    Surrounding whitespace is not trimmed and makes the string invalid.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    return Version.parse(version_string, max_length).valid
