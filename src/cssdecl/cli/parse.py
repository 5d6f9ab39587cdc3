"""CLI command: cssdecl parse -- parse an inline declaration string."""

from __future__ import annotations

import click

from cssdecl.cli._common import color_provider, echo_style
from cssdecl.config import CSSDeclConfig
from cssdecl.parser import parse_declarations


@click.command()
@click.argument("declarations")
@click.pass_obj
def parse(config: CSSDeclConfig, declarations: str) -> None:
    """Parse inline DECLARATIONS such as "color: red; padding: 4px".

    Prints the set fields of the resulting style as JSON.
    """
    echo_style(parse_declarations(declarations, colors=color_provider(config)))
