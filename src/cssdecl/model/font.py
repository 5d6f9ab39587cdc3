"""Typography and material enumerations plus the derived font value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TextStyle(StrEnum):
    """Named steps of the platform's dynamic type scale."""

    LARGE_TITLE = "large-title"
    TITLE = "title"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    BODY = "body"
    CALLOUT = "callout"
    FOOTNOTE = "footnote"
    CAPTION = "caption"
    CAPTION2 = "caption2"


class FontWeight(StrEnum):
    THIN = "thin"
    ULTRA_LIGHT = "ultra-light"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"

    @property
    def numeric(self) -> int:
        """The CSS numeric weight (100-900) for this level."""
        return (list(FontWeight).index(self) + 1) * 100


class Material(StrEnum):
    """Blurred background materials, thinnest to thickest, plus ``bar``."""

    ULTRA_THIN = "ultra-thin"
    THIN = "thin"
    REGULAR = "regular"
    THICK = "thick"
    ULTRA_THICK = "ultra-thick"
    BAR = "bar"


@dataclass(frozen=True)
class ScaledFontSize:
    """A font size that follows a named text style."""

    style: TextStyle


@dataclass(frozen=True)
class FixedFontSize:
    """A font size fixed at a number of points."""

    size: float


FontSize = ScaledFontSize | FixedFontSize


@dataclass(frozen=True)
class FontValue:
    """The font a renderer should use, derived from a StyleSpec.

    Attributes:
        size: The requested size; ``body`` when only weight or italic were set.
        weight: The weight override, if any.
        italic: Whether the italic variant is requested.
    """

    size: FontSize
    weight: FontWeight | None = None
    italic: bool = False
