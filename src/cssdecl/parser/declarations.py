"""Lenient single-pass parser for ``property: value;`` declaration blocks.

Syntax example:
    color: system-indigo; padding: 12px 24px; border-radius: 16px;

Malformed declarations, unknown properties and unparsable values never raise:
the affected field is simply left unset and parsing continues.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable

from cssdecl.colors.base import SemanticColorProvider
from cssdecl.model.style import StyleSpec
from cssdecl.values.color import parse_color
from cssdecl.values.effects import (
    parse_material,
    parse_offset,
    parse_position,
    parse_text_decoration,
)
from cssdecl.values.font import parse_font_size, parse_font_style, parse_font_weight
from cssdecl.values.shorthand import parse_box, parse_corner_radii

__all__ = ["Declaration", "Property", "split_declarations", "parse_declarations"]

log = logging.getLogger("cssdecl.parser")


class Property(StrEnum):
    """Property names understood by the declaration parser."""

    COLOR = "color"
    BACKGROUND_COLOR = "background-color"
    FONT_SIZE = "font-size"
    FONT_WEIGHT = "font-weight"
    FONT_STYLE = "font-style"
    PADDING = "padding"
    MARGIN = "margin"
    BORDER_RADIUS = "border-radius"
    BORDER_WIDTH = "border-width"
    BORDER_COLOR = "border-color"
    BACKGROUND_IMAGE = "background-image"
    BACKGROUND_MATERIAL = "background-material"
    OFFSET = "offset"
    POSITION = "position"
    TEXT_DECORATION = "text-decoration"
    TEXT_DECORATION_COLOR = "text-decoration-color"


@dataclass(frozen=True)
class Declaration:
    """One ``property: value`` pair, trimmed and lowercased."""

    property: str
    value: str


# Each handler maps a value to the StyleSpec field updates it produces.
_Handler = Callable[[str, SemanticColorProvider | None], dict[str, Any]]


def _field(name: str, parse: Callable[[str], Any]) -> _Handler:
    return lambda value, colors: {name: parse(value)}


def _color_field(name: str) -> _Handler:
    return lambda value, colors: {name: parse_color(value, colors)}


def _text_decoration(value: str, colors: SemanticColorProvider | None) -> dict[str, Any]:
    underline, strikethrough = parse_text_decoration(value)
    return {"underline": underline, "strikethrough": strikethrough}


_HANDLERS: dict[Property, _Handler] = {
    Property.COLOR: _color_field("foreground_color"),
    Property.BACKGROUND_COLOR: _color_field("background_color"),
    Property.FONT_SIZE: _field("font_size", parse_font_size),
    Property.FONT_WEIGHT: _field("font_weight", parse_font_weight),
    Property.FONT_STYLE: _field("italic", parse_font_style),
    Property.PADDING: _field("padding", parse_box),
    Property.MARGIN: _field("margin", parse_box),
    Property.BORDER_RADIUS: _field("corner_radii", parse_corner_radii),
    Property.BORDER_WIDTH: _field("border_width", parse_box),
    Property.BORDER_COLOR: _color_field("border_color"),
    Property.BACKGROUND_IMAGE: _field("background_image", str.strip),
    Property.BACKGROUND_MATERIAL: _field("background_material", parse_material),
    Property.OFFSET: _field("offset", parse_offset),
    Property.POSITION: _field("position", parse_position),
    Property.TEXT_DECORATION: _text_decoration,
    Property.TEXT_DECORATION_COLOR: _color_field("decoration_color"),
}


def split_declarations(text: str) -> list[Declaration]:
    """Split *text* on ``;`` and each segment on its first ``:``.

    Segments without a colon, or with nothing at all on one side of it, are
    dropped.
    """
    declarations: list[Declaration] = []
    for segment in text.split(";"):
        prop, colon, value = segment.partition(":")
        if not (colon and prop and value):
            if segment.strip():
                log.debug("Dropping malformed declaration %r", segment.strip())
            continue
        declarations.append(
            Declaration(property=prop.strip().lower(), value=value.strip().lower())
        )
    return declarations


def parse_declarations(
    text: str, colors: SemanticColorProvider | None = None
) -> StyleSpec:
    """Parse a declaration block into a :class:`StyleSpec`.

    Declarations apply in textual order; a later declaration of a property
    replaces any earlier one, even when its value fails to parse.  Semantic
    color tokens are resolved through *colors* (deferred handles by default).
    """
    updates: dict[str, Any] = {}
    for decl in split_declarations(text):
        try:
            prop = Property(decl.property)
        except ValueError:
            log.debug("Ignoring unknown property %r", decl.property)
            continue
        parsed = _HANDLERS[prop](decl.value, colors)
        if None in parsed.values():
            log.debug("Could not parse %s value %r", prop, decl.value)
        updates.update(parsed)
    return StyleSpec(**updates)
