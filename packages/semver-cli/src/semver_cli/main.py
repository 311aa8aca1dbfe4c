# SPDX-License-Identifier: MIT
"""CLI entry point for semver command."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from semver_checker import ConfigError, ParserConfig, Version

from . import __version__


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[ParserConfig] = None
        self.verbose: bool = False
        self.max_length: Optional[int] = None

    def load_config(self) -> ParserConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            if self.max_length is not None:
                self.config = ParserConfig(max_length=self.max_length)
            else:
                self.config = ParserConfig.from_env()
        return self.config

    def parse(self, text: str) -> Version:
        """Parse a version string with the configured length bound."""
        return Version.parse(text, self.load_config().max_length)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--max-length",
    type=click.IntRange(min=1),
    default=None,
    help="Longest accepted version string (default: $SEMVER_MAX_LENGTH or 64).",
)
@pass_context
def cli(ctx: Context, verbose: bool, max_length: Optional[int]) -> None:
    """Semantic version toolkit.

    Validate, compare and bump SemVer 2.0.0 version strings.

    \b
    Examples:
        semver validate 1.2.3-rc.1
        semver compare 1.0.0-alpha 1.0.0
        semver satisfies 1.4.2 1.2.0
        semver bump minor 1.2.3
        semver sort 1.10.0 1.2.0 1.2.0-rc.1
    """
    ctx.verbose = verbose
    ctx.max_length = max_length

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


# Import and register commands
from .commands import validate, compare, bump, sort

cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(compare.diff)
cli.add_command(compare.satisfies)
cli.add_command(bump.bump)
cli.add_command(bump.coerce)
cli.add_command(sort.sort)
cli.add_command(sort.maximum)
cli.add_command(sort.minimum)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
