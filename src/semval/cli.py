# SPDX-License-Identifier: MIT
"""CLI entry point for the semval command."""

from __future__ import annotations

import logging
import sys

import click

from .compare import sort_versions
from .errors import VersionError
from .parser import Dialect, parse
from .range import VersionRange
from .version import Version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.dialect: Dialect = Dialect.STRICT

    def parse(self, text: str) -> Version:
        return parse(text, self.dialect)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="semval")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-d",
    "--dialect",
    type=click.Choice([d.value for d in Dialect]),
    default=Dialect.STRICT.value,
    envvar="SEMVAL_DIALECT",
    show_default=True,
    help="Version text dialect used to parse arguments.",
)
@pass_context
def cli(ctx: Context, verbose: bool, dialect: str) -> None:
    """Parse, compare and range-check semantic versions.

    \b
    Examples:
        semval parse 1.0.0-alpha.1
        semval -d lax parse 1.2
        semval compare 1.0.0-rc.1 1.0.0
        semval sort 1.0.0 1.0.0-beta 0.9.0
        semval contains 1.0.0 2.0.0 --exclude-upper 1.5.0
    """
    ctx.verbose = verbose
    ctx.dialect = Dialect(dialect)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)


@cli.command("parse")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def parse_command(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the canonical form of each VERSION."""
    failed = False
    for text in versions:
        try:
            version = ctx.parse(text)
        except VersionError as e:
            echo_error(str(e))
            failed = True
            continue
        if ctx.verbose:
            echo_info(f"{text} -> {version}")
        else:
            echo_info(str(version))
    if failed:
        sys.exit(1)


@cli.command("compare")
@click.argument("first")
@click.argument("second")
@pass_context
def compare_command(ctx: Context, first: str, second: str) -> None:
    """Print <, = or > comparing FIRST to SECOND."""
    try:
        result = ctx.parse(first).compare_to(ctx.parse(second))
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)
    echo_info({-1: "<", 0: "=", 1: ">"}[result])


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Sort in descending order.")
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in ascending precedence order."""
    try:
        ordered = sort_versions(versions, dialect=ctx.dialect, reverse=reverse)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)
    for version in ordered:
        echo_info(str(version))


@cli.command("contains")
@click.argument("lower")
@click.argument("upper")
@click.argument("version")
@click.option("--exclude-lower", is_flag=True, help="Exclude the lower bound.")
@click.option("--exclude-upper", is_flag=True, help="Exclude the upper bound.")
@pass_context
def contains_command(
    ctx: Context,
    lower: str,
    upper: str,
    version: str,
    exclude_lower: bool,
    exclude_upper: bool,
) -> None:
    """Check whether VERSION lies between LOWER and UPPER.

    Exits with 0 if it does and 1 if it does not.
    """
    try:
        version_range = VersionRange(
            ctx.parse(lower), not exclude_lower, ctx.parse(upper), not exclude_upper
        )
        candidate = ctx.parse(version)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(2)

    contained = version_range.contains(candidate)
    if ctx.verbose:
        echo_info(f"{candidate} in {version_range}: {str(contained).lower()}")
    else:
        echo_info(str(contained).lower())
    sys.exit(0 if contained else 1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
