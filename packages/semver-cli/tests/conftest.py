# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from semver_checker.config import MAX_LENGTH_ENV


@pytest.fixture
def cli_runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Create a Click CLI test runner with no length override in the environment."""
    monkeypatch.delenv(MAX_LENGTH_ENV, raising=False)
    return CliRunner()
