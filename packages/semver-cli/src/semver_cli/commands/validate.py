# SPDX-License-Identifier: MIT
"""Validate semantic version strings."""

from __future__ import annotations

import click

from ..main import Context, echo_error, echo_info, echo_success, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each VERSION is a valid semantic version.

    Exits with status 1 if any version is invalid.

    \b
    Examples:
        semver validate 1.0.0                # valid
        semver validate 1.0.0-01             # invalid (leading zero)
        semver -v validate 1.2.3-rc.1+b.7    # show parsed fields
    """
    invalid = 0

    for text in versions:
        version = ctx.parse(text)
        if not version.valid:
            echo_error(f"{text}: not a valid semantic version")
            invalid += 1
            continue

        echo_success(f"{text}: valid")
        if ctx.verbose:
            echo_info(f"  major:      {version.major}")
            echo_info(f"  minor:      {version.minor}")
            echo_info(f"  patch:      {version.patch}")
            echo_info(f"  prerelease: {version.prerelease_text}")
            echo_info(f"  build:      {version.build_text}")

    if invalid:
        raise SystemExit(1)
