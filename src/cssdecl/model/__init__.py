"""cssdecl model layer -- public type re-exports."""

from cssdecl.model.color import RGBA, Color, SemanticColor
from cssdecl.model.font import (
    FixedFontSize,
    FontSize,
    FontValue,
    FontWeight,
    Material,
    ScaledFontSize,
    TextStyle,
)
from cssdecl.model.geometry import Box, CornerRadii, Point
from cssdecl.model.style import StyleSpec

__all__ = [
    # color
    "RGBA",
    "SemanticColor",
    "Color",
    # font
    "TextStyle",
    "FontWeight",
    "Material",
    "ScaledFontSize",
    "FixedFontSize",
    "FontSize",
    "FontValue",
    # geometry
    "Box",
    "CornerRadii",
    "Point",
    # style
    "StyleSpec",
]
