"""Helpers shared by the CLI subcommands."""

from __future__ import annotations

import json
from pathlib import Path

import click

from cssdecl.colors import SemanticColorProvider, get_color_provider
from cssdecl.config import CSSDeclConfig
from cssdecl.errors import UnknownPlatformError
from cssdecl.model.style import StyleSpec
from cssdecl.stylesheet import DirectoryTextSource, StyleSheet


def color_provider(config: CSSDeclConfig) -> SemanticColorProvider:
    try:
        return get_color_provider(config.platform)
    except UnknownPlatformError as exc:
        raise click.UsageError(str(exc)) from exc


def load_stylesheet(stylesheet: str, config: CSSDeclConfig) -> StyleSheet:
    """Load *stylesheet*, either a file path or a name under the stylesheet dir.

    An existing path is read as-is; only names looked up in the stylesheet
    dir get the default extension.  Exits with an error if nothing can be read.
    """
    sheet = StyleSheet()
    path = Path(stylesheet)
    if path.is_file():
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise click.ClickException(
                f"Could not read stylesheet {stylesheet!r}: {exc}"
            ) from exc
        sheet.parse(text)
        return sheet
    source = DirectoryTextSource(config.stylesheet_dir, config.default_extension)
    if not sheet.load(stylesheet, source):
        raise click.ClickException(f"Could not read stylesheet {stylesheet!r}")
    return sheet


def echo_style(style: StyleSpec) -> None:
    click.echo(json.dumps(style.to_dict(), indent=2))
