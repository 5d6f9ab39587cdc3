"""cssdecl -- CSS-like declarations and class stylesheets parsed into style values."""

from cssdecl.model import (
    RGBA,
    Box,
    CornerRadii,
    FixedFontSize,
    FontValue,
    FontWeight,
    Material,
    Point,
    ScaledFontSize,
    SemanticColor,
    StyleSpec,
    TextStyle,
)
from cssdecl.parser import parse_declarations
from cssdecl.stylesheet import StyleSheet

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "RGBA",
    "SemanticColor",
    "Box",
    "CornerRadii",
    "Point",
    "TextStyle",
    "FontWeight",
    "Material",
    "ScaledFontSize",
    "FixedFontSize",
    "FontValue",
    "StyleSpec",
    "StyleSheet",
    "parse_declarations",
]
