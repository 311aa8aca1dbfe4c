# SPDX-License-Identifier: MIT
"""Compare versions: precedence, difference and compatibility."""

from __future__ import annotations

import click

from semver_checker import compare_versions, diff as diff_versions, satisfies as is_satisfied

from ..main import Context, echo_error, echo_info, echo_warning, pass_context


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower than, equal to or higher than VERSION2.

    Build metadata is ignored. Invalid versions cannot be compared.
    """
    v1 = ctx.parse(version1)
    v2 = ctx.parse(version2)

    for text, version in ((version1, v1), (version2, v2)):
        if not version.valid:
            echo_error(f"{text}: not a valid semantic version")
            raise SystemExit(1)

    echo_info(str(compare_versions(v1, v2)))


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def diff(ctx: Context, version1: str, version2: str) -> None:
    """Print the most significant field that differs between two versions.

    One of: none, major, minor, patch, prerelease.
    """
    v1 = ctx.parse(version1)
    v2 = ctx.parse(version2)

    if not v1.valid or not v2.valid:
        echo_warning("invalid versions always report no difference")

    echo_info(diff_versions(v1, v2).value)


@click.command()
@click.argument("version")
@click.argument("requirement")
@pass_context
def satisfies(ctx: Context, version: str, requirement: str) -> None:
    """Check that VERSION is caret-compatible with REQUIREMENT.

    VERSION must be at least REQUIREMENT with the same major version (and
    the same minor version below 1.0.0). Exits with status 1 otherwise.

    \b
    Examples:
        semver satisfies 1.2.5 1.2.0     # true
        semver satisfies 0.3.0 0.2.0     # false
    """
    result = is_satisfied(ctx.parse(version), ctx.parse(requirement))
    echo_info("true" if result else "false")
    if not result:
        raise SystemExit(1)
