"""CLI command: cssdecl resolve -- merge style classes from a stylesheet."""

from __future__ import annotations

import click

from cssdecl.cli._common import color_provider, echo_style, load_stylesheet
from cssdecl.config import CSSDeclConfig
from cssdecl.parser import parse_declarations


@click.command()
@click.argument("stylesheet")
@click.argument("classes", nargs=-1, required=True)
@click.option("--raw", is_flag=True, help="Print the merged declarations instead of JSON.")
@click.pass_obj
def resolve(config: CSSDeclConfig, stylesheet: str, classes: tuple[str, ...], raw: bool) -> None:
    """Resolve CLASSES from STYLESHEET, later classes overriding earlier ones."""
    sheet = load_stylesheet(stylesheet, config)

    missing = [name for name in classes if name not in sheet]
    for name in missing:
        click.echo(f"Warning: no class {name!r} in {stylesheet}", err=True)

    merged = sheet.resolve(classes)
    if raw:
        click.echo(merged)
        return
    echo_style(parse_declarations(merged, colors=color_provider(config)))
