from cssdecl.values.color import parse_color, parse_hex_color, parse_rgb_color
from cssdecl.values.effects import (
    parse_material,
    parse_offset,
    parse_position,
    parse_text_decoration,
)
from cssdecl.values.font import parse_font_size, parse_font_style, parse_font_weight
from cssdecl.values.length import parse_length, parse_lengths, parse_number
from cssdecl.values.shorthand import parse_box, parse_corner_radii

__all__ = [
    "parse_number",
    "parse_length",
    "parse_lengths",
    "parse_box",
    "parse_corner_radii",
    "parse_color",
    "parse_hex_color",
    "parse_rgb_color",
    "parse_font_size",
    "parse_font_weight",
    "parse_font_style",
    "parse_material",
    "parse_offset",
    "parse_position",
    "parse_text_decoration",
]
