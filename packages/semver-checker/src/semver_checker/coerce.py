# SPDX-License-Identifier: MIT
"""Best-effort repair of loosely written version strings.

``coerce`` is a heuristic, not a grammar: it drops a leading ``v``/``V``
and pads a short core (``1`` or ``1.2``) with zeros before handing the
result to the strict parser. Input it cannot repair comes back as the
canonical invalid Version. It can accept strings a human would not call
a version (``"v0-1"`` becomes ``0.0.0-1``), so only use it on input that
is already known to be version-like.
"""

from __future__ import annotations

import logging

from .config import DEFAULT_MAX_LENGTH
from .semver import Version

logger = logging.getLogger(__name__)


def _split_suffix(text: str) -> tuple[str, str]:
    """Split ``text`` into the core and a ``-pre``/``+build`` suffix."""
    for index, char in enumerate(text):
        if char in "-+":
            return text[:index], text[index:]
    return text, ""


def coerce(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> Version:
    """Coerce a loose version string into a Version.

    Args:
        text: Loose version string such as ``"v1.2"`` or ``"1-rc.1"``
        max_length: Longest padded string handed to the parser

    Returns:
        The parsed Version, or the canonical invalid Version

    Examples:
        >>> str(coerce("v1.2"))
        '1.2.0'
        >>> str(coerce("1-rc.1+b7"))
        '1.0.0-rc.1+b7'
        >>> coerce("1.2.3.4.5").valid
        False
    """
    if not isinstance(text, str) or not text:
        return Version.invalid()

    if text[0] in "vV":
        text = text[1:]

    core, suffix = _split_suffix(text)
    dots = core.count(".")
    if dots == 0:
        core += ".0.0"
    elif dots == 1:
        core += ".0"
    elif dots > 2:
        logger.debug("Cannot coerce %r: %d separators in core version", text, dots)
        return Version.invalid()

    return Version.parse(core + suffix, max_length)
