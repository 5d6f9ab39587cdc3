"""Color value parsing: named colors, semantic tokens, hex and ``rgb()`` literals."""

from __future__ import annotations

import re

from cssdecl.colors.base import SEMANTIC_TOKENS, SemanticColorProvider
from cssdecl.colors.providers import DeferredColorProvider
from cssdecl.model.color import RGBA, Color
from cssdecl.values.length import parse_number

__all__ = ["NAMED_COLORS", "SEMANTIC_SPELLINGS", "parse_color", "parse_hex_color", "parse_rgb_color"]

_rgb = RGBA.from_bytes

NAMED_COLORS: dict[str, RGBA] = {
    "red": _rgb(255, 0, 0),
    "blue": _rgb(0, 0, 255),
    "green": _rgb(0, 128, 0),
    "black": _rgb(0, 0, 0),
    "white": _rgb(255, 255, 255),
    "gray": _rgb(128, 128, 128),
    "grey": _rgb(128, 128, 128),
    "orange": _rgb(255, 165, 0),
    "yellow": _rgb(255, 255, 0),
    "pink": _rgb(255, 192, 203),
    "purple": _rgb(128, 0, 128),
    "cyan": _rgb(0, 255, 255),
    "mint": _rgb(0, 199, 190),
    "teal": _rgb(0, 128, 128),
    "indigo": _rgb(75, 0, 130),
}


def _spellings(token: str) -> tuple[str, str]:
    hyphenated = re.sub(r"(?<!^)(?=[A-Z])", "-", token).lower()
    return hyphenated, token.lower()


# "secondary-system-background" and "secondarysystembackground" both map to
# "secondarySystemBackground".
SEMANTIC_SPELLINGS: dict[str, str] = {
    spelling: token for token in SEMANTIC_TOKENS for spelling in _spellings(token)
}

_HEX_RE = re.compile(r"[0-9a-fA-F]+")

_DEFAULT_PROVIDER = DeferredColorProvider()


def parse_color(
    value: str, provider: SemanticColorProvider | None = None
) -> Color | None:
    """Parse a lowercased color value.

    Named colors come first, then semantic tokens (resolved through
    *provider*, the deferred provider by default), then ``#`` hex literals
    and ``rgb()`` functions.  Returns None for anything else.
    """
    named = NAMED_COLORS.get(value)
    if named is not None:
        return named
    token = SEMANTIC_SPELLINGS.get(value)
    if token is not None:
        return (provider or _DEFAULT_PROVIDER).resolve(token)
    if value.startswith("#"):
        return parse_hex_color(value)
    if value.startswith("rgb("):
        return parse_rgb_color(value)
    return None


def parse_hex_color(value: str) -> RGBA | None:
    """Parse ``#rrggbb`` or ``#rrggbbaa``.

    Three- and four-digit shorthand is not supported and returns None.
    """
    digits = value.strip().removeprefix("#")
    if len(digits) not in (6, 8) or _HEX_RE.fullmatch(digits) is None:
        return None
    channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    return _rgb(*channels)


def parse_rgb_color(value: str) -> RGBA | None:
    """Parse ``rgb(r, g, b)`` with 0-255 decimal components."""
    body = value.strip().removeprefix("rgb(").removesuffix(")")
    components = [parse_number(part.strip()) for part in body.split(",")]
    if len(components) != 3 or any(c is None for c in components):
        return None
    red, green, blue = components
    return RGBA(red / 255, green / 255, blue / 255)  # type: ignore[operator]
