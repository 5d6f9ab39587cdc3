"""cssdecl CLI entry point: Click group with subcommands."""

from __future__ import annotations

import dataclasses
import logging

import click

from cssdecl import __version__
from cssdecl.colors import PLATFORMS
from cssdecl.config import CSSDeclConfig
from cssdecl.errors import InvalidLogLevelError


@click.group()
@click.version_option(version=__version__, prog_name="cssdecl")
@click.option(
    "--platform",
    type=click.Choice(PLATFORMS, case_sensitive=False),
    default=None,
    help="Semantic color provider (default: $CSSDECL_PLATFORM or deferred).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log parsing details.")
@click.pass_context
def cli(ctx: click.Context, platform: str | None, verbose: bool) -> None:
    """cssdecl - parse CSS-like declarations and class stylesheets."""
    try:
        config = CSSDeclConfig.from_env()
    except InvalidLogLevelError as exc:
        raise click.UsageError(f"CSSDECL_LOG_LEVEL: {exc}") from exc
    if platform:
        config = dataclasses.replace(config, platform=platform.lower())
    if verbose:
        config = dataclasses.replace(config, log_level="DEBUG")
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


# Import and register subcommands
from cssdecl.cli.inspect import inspect  # noqa: E402
from cssdecl.cli.parse import parse  # noqa: E402
from cssdecl.cli.resolve import resolve  # noqa: E402

cli.add_command(parse)
cli.add_command(resolve)
cli.add_command(inspect)
