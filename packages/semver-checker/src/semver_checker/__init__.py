# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and comparison.

This package parses and compares version strings following the SemVer 2.0.0
specification. Malformed input never raises: it produces an invalid Version
that compares unequal to everything and has no place in the order.

Example:
    >>> from semver_checker import Version, coerce, is_valid_semver
    >>>
    >>> version = Version.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_text
    'alpha.1'
    >>> version < Version.parse("1.2.3")
    True
    >>>
    >>> is_valid_semver("1.0.0-01")
    False
    >>>
    >>> str(coerce("v1.2"))
    '1.2.0'
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_MAX_LENGTH,
    UINT32_MAX,
    ConfigError,
    ParserConfig,
)
from .semver import (
    INVALID_VERSION_TEXT,
    Version,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
)
from .compare import (
    VersionDiff,
    compare_versions,
    version_key,
    satisfies,
    maximum,
    minimum,
    is_upgrade,
    diff,
)
from .coerce import coerce
from .render import render_into

__all__ = [
    # Configuration
    "DEFAULT_MAX_LENGTH",
    "UINT32_MAX",
    "ConfigError",
    "ParserConfig",
    # Version parsing
    "INVALID_VERSION_TEXT",
    "Version",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    "coerce",
    "render_into",
    # Version comparison
    "VersionDiff",
    "compare_versions",
    "version_key",
    "satisfies",
    "maximum",
    "minimum",
    "is_upgrade",
    "diff",
]
