# SPDX-License-Identifier: MIT
"""Derive new versions: increment and coerce."""

from __future__ import annotations

import click

from semver_checker import coerce as coerce_version

from ..main import Context, echo_error, echo_info, pass_context

_INCREMENTS = {
    "major": lambda version: version.inc_major(),
    "minor": lambda version: version.inc_minor(),
    "patch": lambda version: version.inc_patch(),
}


@click.command()
@click.argument("part", type=click.Choice(list(_INCREMENTS)))
@click.argument("version")
@pass_context
def bump(ctx: Context, part: str, version: str) -> None:
    """Increment PART of VERSION and print the result.

    Lower fields are reset to zero and pre-release and build metadata are
    dropped.

    \b
    Examples:
        semver bump patch 1.2.3          # 1.2.4
        semver bump major 1.2.3-rc.1     # 2.0.0
    """
    current = ctx.parse(version)
    if not current.valid:
        echo_error(f"{version}: not a valid semantic version")
        raise SystemExit(1)

    bumped = _INCREMENTS[part](current)
    if not bumped.valid:
        echo_error(f"{version}: {part} version cannot be incremented further")
        raise SystemExit(1)

    echo_info(str(bumped))


@click.command()
@click.argument("text")
@pass_context
def coerce(ctx: Context, text: str) -> None:
    """Repair a loose version string such as v1.2 into 1.2.0.

    This is a heuristic: a leading v is dropped and a missing minor or
    patch is filled with zero. Exits with status 1 if no valid version
    results.
    """
    version = coerce_version(text, ctx.load_config().max_length)
    if not version.valid:
        echo_error(f"{text}: cannot be coerced to a semantic version")
        raise SystemExit(1)

    echo_info(str(version))
