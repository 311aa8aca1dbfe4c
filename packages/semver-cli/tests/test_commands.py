# SPDX-License-Identifier: MIT
"""Tests for the semver commands."""

from __future__ import annotations

from click.testing import CliRunner

from semver_checker import ConfigError
from semver_checker.config import MAX_LENGTH_ENV
from semver_cli import __version__
from semver_cli.main import cli


class TestGlobalOptions:
    """Tests for options on the semver group."""

    def test_version(self, cli_runner: CliRunner) -> None:
        """Test the --version option."""
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_max_length_option(self, cli_runner: CliRunner) -> None:
        """Test that --max-length bounds accepted input."""
        result = cli_runner.invoke(cli, ["--max-length", "5", "validate", "1.0.0-rc"])

        assert result.exit_code == 1
        assert "not a valid semantic version" in result.output

    def test_max_length_from_env(self, cli_runner: CliRunner) -> None:
        """Test that the environment can raise the bound."""
        long_version = "1.0.0-" + "a" * 100

        result = cli_runner.invoke(cli, ["validate", long_version])
        assert result.exit_code == 1

        result = cli_runner.invoke(cli, ["validate", long_version], env={MAX_LENGTH_ENV: "200"})
        assert result.exit_code == 0

    def test_bad_env_config(self, cli_runner: CliRunner) -> None:
        """Test that a malformed environment bound is a configuration error."""
        result = cli_runner.invoke(cli, ["validate", "1.0.0"], env={MAX_LENGTH_ENV: "lots"})

        assert result.exit_code != 0
        assert isinstance(result.exception, ConfigError)

    def test_rejects_zero_max_length(self, cli_runner: CliRunner) -> None:
        """Test that --max-length must be positive."""
        result = cli_runner.invoke(cli, ["--max-length", "0", "validate", "1.0.0"])

        assert result.exit_code == 2


class TestValidateCommand:
    """Tests for semver validate command."""

    def test_valid(self, cli_runner: CliRunner) -> None:
        """Test validating good versions."""
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "1.0.0-rc.1+b.2"])

        assert result.exit_code == 0
        assert "1.0.0: valid" in result.output
        assert "1.0.0-rc.1+b.2: valid" in result.output

    def test_invalid(self, cli_runner: CliRunner) -> None:
        """Test that one invalid version fails the command."""
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "1.0.0-01"])

        assert result.exit_code == 1
        assert "1.0.0-01: not a valid semantic version" in result.output

    def test_verbose_fields(self, cli_runner: CliRunner) -> None:
        """Test that verbose mode prints the parsed fields."""
        result = cli_runner.invoke(cli, ["-v", "validate", "10.20.30-alpha.1+build.5"])

        assert result.exit_code == 0
        assert "major:      10" in result.output
        assert "prerelease: alpha.1" in result.output
        assert "build:      build.5" in result.output

    def test_requires_argument(self, cli_runner: CliRunner) -> None:
        """Test that at least one version is required."""
        result = cli_runner.invoke(cli, ["validate"])

        assert result.exit_code == 2


class TestCompareCommands:
    """Tests for compare, diff and satisfies."""

    def test_compare(self, cli_runner: CliRunner) -> None:
        """Test the three comparison outcomes."""
        assert cli_runner.invoke(cli, ["compare", "1.0.0-alpha", "1.0.0"]).output.strip() == "-1"
        assert cli_runner.invoke(cli, ["compare", "1.0.0+a", "1.0.0+b"]).output.strip() == "0"
        assert cli_runner.invoke(cli, ["compare", "1.10.0", "1.9.0"]).output.strip() == "1"

    def test_compare_invalid(self, cli_runner: CliRunner) -> None:
        """Test that invalid input cannot be compared."""
        result = cli_runner.invoke(cli, ["compare", "1.0.0", "1.0"])

        assert result.exit_code == 1
        assert "1.0: not a valid semantic version" in result.output

    def test_diff(self, cli_runner: CliRunner) -> None:
        """Test difference classification output."""
        result = cli_runner.invoke(cli, ["diff", "1.2.3", "1.3.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "minor"

    def test_diff_invalid(self, cli_runner: CliRunner) -> None:
        """Test that invalid versions report none with a warning."""
        result = cli_runner.invoke(cli, ["diff", "bad", "1.0.0"])

        assert result.exit_code == 0
        assert "none" in result.output
        assert "Warning" in result.output

    def test_satisfies(self, cli_runner: CliRunner) -> None:
        """Test a compatible version."""
        result = cli_runner.invoke(cli, ["satisfies", "1.2.5", "1.2.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_does_not_satisfy(self, cli_runner: CliRunner) -> None:
        """Test an incompatible pre-1.0 version."""
        result = cli_runner.invoke(cli, ["satisfies", "0.3.0", "0.2.0"])

        assert result.exit_code == 1
        assert result.output.strip() == "false"


class TestDeriveCommands:
    """Tests for bump and coerce."""

    def test_bump(self, cli_runner: CliRunner) -> None:
        """Test each increment."""
        assert cli_runner.invoke(cli, ["bump", "patch", "1.2.3"]).output.strip() == "1.2.4"
        assert cli_runner.invoke(cli, ["bump", "minor", "1.2.3"]).output.strip() == "1.3.0"
        assert cli_runner.invoke(cli, ["bump", "major", "1.2.3-rc.1"]).output.strip() == "2.0.0"

    def test_bump_invalid(self, cli_runner: CliRunner) -> None:
        """Test bumping a string that is not a version."""
        result = cli_runner.invoke(cli, ["bump", "patch", "1.2"])

        assert result.exit_code == 1

    def test_bump_overflow(self, cli_runner: CliRunner) -> None:
        """Test bumping past the 32-bit range."""
        result = cli_runner.invoke(cli, ["bump", "major", "4294967295.0.0"])

        assert result.exit_code == 1
        assert "cannot be incremented" in result.output

    def test_bump_unknown_part(self, cli_runner: CliRunner) -> None:
        """Test that only major, minor and patch can be bumped."""
        result = cli_runner.invoke(cli, ["bump", "build", "1.2.3"])

        assert result.exit_code == 2

    def test_coerce(self, cli_runner: CliRunner) -> None:
        """Test coercing a loose version."""
        result = cli_runner.invoke(cli, ["coerce", "v1.2"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.0"

    def test_coerce_failure(self, cli_runner: CliRunner) -> None:
        """Test a string that cannot be coerced."""
        result = cli_runner.invoke(cli, ["coerce", "1.2.3.4.5"])

        assert result.exit_code == 1
        assert "cannot be coerced" in result.output


class TestSortCommands:
    """Tests for sort, max and min."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        """Test precedence ordering output."""
        result = cli_runner.invoke(cli, ["sort", "1.10.0", "1.2.0", "1.2.0-rc.1", "1.2.0-beta"])

        assert result.exit_code == 0
        assert result.output.split() == ["1.2.0-beta", "1.2.0-rc.1", "1.2.0", "1.10.0"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        """Test descending order."""
        result = cli_runner.invoke(cli, ["sort", "-r", "1.0.0", "2.0.0"])

        assert result.output.split() == ["2.0.0", "1.0.0"]

    def test_sort_skips_invalid(self, cli_runner: CliRunner) -> None:
        """Test that invalid versions are reported and skipped."""
        result = cli_runner.invoke(cli, ["sort", "2.0.0", "nope", "1.0.0"])

        assert result.exit_code == 0
        assert "Skipping invalid version: nope" in result.output
        assert "2.0.0" in result.output

    def test_max(self, cli_runner: CliRunner) -> None:
        """Test the maximum of several versions."""
        result = cli_runner.invoke(cli, ["max", "1.0.0", "bad", "1.0.1-rc.1", "0.9.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.1-rc.1"

    def test_min(self, cli_runner: CliRunner) -> None:
        """Test the minimum of several versions."""
        result = cli_runner.invoke(cli, ["min", "1.0.0", "1.0.0-alpha", "bad"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0-alpha"

    def test_max_all_invalid(self, cli_runner: CliRunner) -> None:
        """Test that no valid input is an error."""
        result = cli_runner.invoke(cli, ["max", "bad", "worse"])

        assert result.exit_code == 1
        assert "No valid version" in result.output
