"""Font-size, font-weight and font-style parsing."""

from __future__ import annotations

from cssdecl.model.font import FixedFontSize, FontSize, FontWeight, ScaledFontSize, TextStyle
from cssdecl.values.length import LENGTH_UNITS, parse_number

__all__ = ["parse_font_size", "parse_font_weight", "parse_font_style"]

_TEXT_STYLES: dict[str, TextStyle] = {style.value: style for style in TextStyle}
_TEXT_STYLES["title1"] = TextStyle.TITLE
_TEXT_STYLES["caption1"] = TextStyle.CAPTION

# Legacy CSS absolute-size keywords, in points.
_KEYWORD_SIZES: dict[str, float] = {
    "x-small": 10,
    "small": 12,
    "medium": 16,
    "normal": 16,
    "large": 20,
    "x-large": 24,
    "xx-large": 28,
}

_WEIGHTS: dict[str, FontWeight] = {
    "100": FontWeight.THIN,
    "thin": FontWeight.THIN,
    "200": FontWeight.ULTRA_LIGHT,
    "ultralight": FontWeight.ULTRA_LIGHT,
    "extra-light": FontWeight.ULTRA_LIGHT,
    "300": FontWeight.LIGHT,
    "light": FontWeight.LIGHT,
    "400": FontWeight.REGULAR,
    "normal": FontWeight.REGULAR,
    "regular": FontWeight.REGULAR,
    "500": FontWeight.MEDIUM,
    "medium": FontWeight.MEDIUM,
    "600": FontWeight.SEMIBOLD,
    "semibold": FontWeight.SEMIBOLD,
    "semi-bold": FontWeight.SEMIBOLD,
    "700": FontWeight.BOLD,
    "bold": FontWeight.BOLD,
    "800": FontWeight.HEAVY,
    "heavy": FontWeight.HEAVY,
    "extrabold": FontWeight.HEAVY,
    "900": FontWeight.BLACK,
    "black": FontWeight.BLACK,
}


def parse_font_size(value: str) -> FontSize | None:
    """Parse a ``font-size`` value.

    Precedence: named text style, then a ``px``/``pt`` length, then a legacy
    keyword, then a bare number.
    """
    style = _TEXT_STYLES.get(value)
    if style is not None:
        return ScaledFontSize(style)
    for unit in LENGTH_UNITS:
        if value.endswith(unit):
            size = parse_number(value[: -len(unit)].strip())
            if size is not None:
                return FixedFontSize(size)
    keyword_size = _KEYWORD_SIZES.get(value)
    if keyword_size is not None:
        return FixedFontSize(keyword_size)
    size = parse_number(value)
    if size is not None:
        return FixedFontSize(size)
    return None


def parse_font_weight(value: str) -> FontWeight | None:
    return _WEIGHTS.get(value)


def parse_font_style(value: str) -> bool:
    """True only for ``italic``; any other value resets to upright."""
    return value == "italic"
