# SPDX-License-Identifier: MIT
"""Rendering versions into fixed-capacity byte buffers."""

from __future__ import annotations

from .semver import Version


def render_into(version: Version, buffer: bytearray) -> int:
    """Write the string form of ``version`` into ``buffer``.

    At most ``len(buffer) - 1`` bytes of text are written, followed by a
    NUL terminator, so the output is always terminated within the buffer.
    Longer text is truncated. An invalid Version renders as ``invalid``.

    Args:
        version: Version to render
        buffer: Caller-owned output buffer; its size is never changed

    Returns:
        Number of text bytes written, excluding the terminator

    Examples:
        >>> buf = bytearray(6)
        >>> render_into(Version.parse("10.20.30"), buf)
        5
        >>> bytes(buf)
        b'10.20\\x00'
    """
    capacity = len(buffer)
    if capacity == 0:
        return 0

    # Versions are pure ASCII by construction
    data = str(version).encode("ascii")[: capacity - 1]
    buffer[: len(data)] = data
    buffer[len(data)] = 0
    return len(data)
