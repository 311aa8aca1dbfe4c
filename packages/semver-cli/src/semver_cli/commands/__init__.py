# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import validate, compare, bump, sort

__all__ = ["validate", "compare", "bump", "sort"]
