"""CLI command: cssdecl inspect -- list the classes a stylesheet defines."""

from __future__ import annotations

import click

from cssdecl.cli._common import load_stylesheet
from cssdecl.config import CSSDeclConfig
from cssdecl.parser import split_declarations


@click.command()
@click.argument("stylesheet")
@click.pass_obj
def inspect(config: CSSDeclConfig, stylesheet: str) -> None:
    """List the classes defined in STYLESHEET with their declarations."""
    sheet = load_stylesheet(stylesheet, config)

    click.echo(f"Classes: {len(sheet)}")
    for name in sheet.names():
        click.echo()
        click.echo(f".{name}")
        for decl in split_declarations(sheet.css(name) or ""):
            click.echo(f"  {decl.property}: {decl.value}")
