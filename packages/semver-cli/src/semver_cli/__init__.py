# SPDX-License-Identifier: MIT
"""Command-line interface for semantic version checks."""

__version__ = "0.1.0"
