# SPDX-License-Identifier: MIT
"""Validation of version segments located by the segmenter.

Core segments (major, minor, patch) must be decimal digits without a
leading zero and must fit in an unsigned 32-bit integer. Pre-release and
build metadata are dot-separated identifier lists over ``[0-9A-Za-z-]``;
numeric pre-release identifiers may not carry a leading zero.
"""

from __future__ import annotations

import logging
import string
from typing import Optional

from .config import UINT32_MAX
from .segmenter import Segments, Span

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")

# Overflow guard for digit accumulation: value * 10 + digit <= UINT32_MAX
_CUTOFF, _CUTLIM = divmod(UINT32_MAX, 10)


def is_numeric(identifier: str) -> bool:
    """Return True if ``identifier`` is non-empty and all ASCII digits."""
    return bool(identifier) and all(char in DIGITS for char in identifier)


def has_leading_zero(identifier: str) -> bool:
    """Return True for a multi-digit numeric string starting with ``0``."""
    return len(identifier) > 1 and identifier[0] == "0" and is_numeric(identifier)


def parse_uint32(digits: str) -> Optional[int]:
    """Convert a digit string to an int, refusing values above UINT32_MAX.

    The running value is checked before each digit is appended, so an
    oversized segment is rejected as soon as it would overflow.

    Examples:
        >>> parse_uint32("4294967295")
        4294967295
        >>> parse_uint32("4294967296") is None
        True
    """
    value = 0
    for char in digits:
        digit = ord(char) - ord("0")
        if value > _CUTOFF or (value == _CUTOFF and digit > _CUTLIM):
            return None
        value = value * 10 + digit
    return value


def check_core_segment(segment: str) -> bool:
    """Return True if ``segment`` is a legal major, minor or patch field."""
    if not segment:
        return False
    if not is_numeric(segment):
        return False
    if has_leading_zero(segment):
        return False
    return True


def parse_core(text: str, segments: Segments) -> Optional[tuple[int, int, int]]:
    """Validate and convert the three core segments.

    Returns:
        ``(major, minor, patch)``, or None if any segment is malformed or
        exceeds UINT32_MAX
    """
    values = []
    for name, span in (
        ("major", segments.major),
        ("minor", segments.minor),
        ("patch", segments.patch),
    ):
        segment = span.of(text)
        if not check_core_segment(segment):
            logger.debug("Rejected %r: malformed %s segment %r", text, name, segment)
            return None
        value = parse_uint32(segment)
        if value is None:
            logger.debug("Rejected %r: %s segment %s exceeds %d", text, name, segment, UINT32_MAX)
            return None
        values.append(value)

    major, minor, patch = values
    return major, minor, patch


def check_prerelease_identifier(identifier: str) -> bool:
    """Return True if ``identifier`` is a legal pre-release identifier."""
    if not identifier:
        return False
    if any(char not in IDENTIFIER_CHARS for char in identifier):
        return False
    if has_leading_zero(identifier):
        return False
    return True


def check_build_identifier(identifier: str) -> bool:
    """Return True if ``identifier`` is a legal build metadata identifier."""
    if not identifier:
        return False
    return all(char in IDENTIFIER_CHARS for char in identifier)


def _split_identifiers(text: str, span: Span, kind: str, check) -> Optional[tuple[str, ...]]:
    segment = span.of(text)
    if not segment:
        logger.debug("Rejected %r: empty %s", text, kind)
        return None

    # str.split keeps empty strings for leading, trailing and doubled dots
    identifiers = tuple(segment.split("."))
    for identifier in identifiers:
        if not identifier:
            logger.debug("Rejected %r: empty identifier in %s %r", text, kind, segment)
            return None
        if not check(identifier):
            logger.debug("Rejected %r: invalid %s identifier %r", text, kind, identifier)
            return None
    return identifiers


def parse_prerelease(text: str, span: Span) -> Optional[tuple[str, ...]]:
    """Split and validate a pre-release range into its identifiers."""
    return _split_identifiers(text, span, "pre-release", check_prerelease_identifier)


def parse_build(text: str, span: Span) -> Optional[tuple[str, ...]]:
    """Split and validate a build metadata range into its identifiers."""
    return _split_identifiers(text, span, "build metadata", check_build_identifier)


def check_identifiers(identifiers: tuple[str, ...], *, build: bool = False) -> bool:
    """Return True if every identifier in a sequence is legal.

    Used to vet identifier sequences that did not come through the parser.
    """
    check = check_build_identifier if build else check_prerelease_identifier
    return all(isinstance(identifier, str) and check(identifier) for identifier in identifiers)
