# SPDX-License-Identifier: MIT
"""Order collections of versions."""

from __future__ import annotations

from functools import reduce

import click

from semver_checker import Version, maximum as max_version, minimum as min_version, version_key

from ..main import Context, echo_error, echo_info, echo_warning, pass_context


def _parse_all(ctx: Context, texts: tuple[str, ...]) -> list[Version]:
    versions = []
    for text in texts:
        version = ctx.parse(text)
        if not version.valid:
            echo_warning(f"Skipping invalid version: {text}")
            continue
        versions.append(version)
    return versions


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order, one per line.

    Invalid versions are reported and skipped.
    """
    for version in sorted(_parse_all(ctx, versions), key=version_key, reverse=reverse):
        echo_info(str(version))


@click.command("max")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def maximum(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the highest of VERSIONS."""
    result = reduce(max_version, [ctx.parse(text) for text in versions])
    if not result.valid:
        echo_error("No valid version given")
        raise SystemExit(1)
    echo_info(str(result))


@click.command("min")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def minimum(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the lowest of VERSIONS."""
    result = reduce(min_version, [ctx.parse(text) for text in versions])
    if not result.valid:
        echo_error("No valid version given")
        raise SystemExit(1)
    echo_info(str(result))
