# SPDX-License-Identifier: MIT
"""Input guarding and segment boundary detection.

Splits a candidate version string into character ranges:

    MAJOR . MINOR . PATCH [- PRERELEASE] [+ BUILD]

Only the structural separators are located here. The content of each range
is checked by the validator module.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from .config import DEFAULT_MAX_LENGTH

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


class Span(NamedTuple):
    """Half-open character range ``[start, end)`` into the source text."""

    start: int
    end: int

    def of(self, text: str) -> str:
        """Return the slice of ``text`` covered by this span."""
        return text[self.start : self.end]

    @property
    def length(self) -> int:
        return self.end - self.start


class Segments(NamedTuple):
    """Character ranges of each version segment.

    ``prerelease`` and ``build`` are None when the separator that introduces
    them is absent. A present span may still be empty (``"1.0.0-"``); that
    is rejected later by the metadata validator.
    """

    major: Span
    minor: Span
    patch: Span
    prerelease: Optional[Span]
    build: Optional[Span]


def check_length(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> bool:
    """Return True if ``text`` is non-empty and no longer than ``max_length``."""
    if not text:
        logger.debug("Rejected empty version string")
        return False
    if len(text) > max_length:
        logger.debug("Rejected version string of length %d (limit %d)", len(text), max_length)
        return False
    return True


def split_segments(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> Optional[Segments]:
    """Locate the segment boundaries of a version string.

    Args:
        text: Candidate version string
        max_length: Longest accepted input

    Returns:
        The segment spans, or None if the structure is malformed

    Examples:
        >>> split_segments("1.2.3-rc.1+b5").prerelease
        Span(start=6, end=10)
        >>> split_segments("1.2") is None
        True
    """
    if not check_length(text, max_length):
        return None

    dot1 = text.find(".")
    if dot1 == -1:
        logger.debug("Rejected %r: missing minor separator", text)
        return None

    dot2 = text.find(".", dot1 + 1)
    if dot2 == -1:
        logger.debug("Rejected %r: missing patch separator", text)
        return None

    if dot1 == 0 or dot2 - dot1 <= 1:
        logger.debug("Rejected %r: empty major or minor segment", text)
        return None

    # The patch runs up to the first '-' or '+'; anything else must be a digit
    hyphen = -1
    patch_end = len(text)
    for index in range(dot2 + 1, len(text)):
        char = text[index]
        if char == "+":
            patch_end = index
            break
        if char == "-":
            hyphen = index
            patch_end = index
            break
        if char not in _DIGITS:
            logger.debug("Rejected %r: unexpected %r in patch segment", text, char)
            return None

    plus = text.find("+")
    if plus != -1 and plus <= dot2:
        logger.debug("Rejected %r: build metadata before patch segment", text)
        return None
    if hyphen != -1 and plus != -1 and plus < hyphen:
        logger.debug("Rejected %r: build metadata precedes pre-release", text)
        return None

    prerelease: Optional[Span] = None
    if hyphen != -1:
        prerelease = Span(hyphen + 1, plus if plus != -1 else len(text))

    build: Optional[Span] = None
    if plus != -1:
        build = Span(plus + 1, len(text))

    return Segments(
        major=Span(0, dot1),
        minor=Span(dot1 + 1, dot2),
        patch=Span(dot2 + 1, patch_end),
        prerelease=prerelease,
        build=build,
    )
