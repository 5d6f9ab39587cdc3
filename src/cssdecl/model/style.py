"""StyleSpec: the resolved set of style fields produced by the declaration parser."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

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

if TYPE_CHECKING:
    from cssdecl.colors.base import SemanticColorProvider


@dataclass(frozen=True)
class StyleSpec:
    """Style values parsed from CSS-like declarations.

    Every field is optional and independent; ``None`` means the field was not
    set (or its last declaration failed to parse).  The three text flags
    default to ``False``.
    """

    foreground_color: Color | None = None
    background_color: Color | None = None
    font_size: FontSize | None = None
    font_weight: FontWeight | None = None
    padding: Box | None = None
    margin: Box | None = None
    corner_radii: CornerRadii | None = None
    border_width: Box | None = None
    border_color: Color | None = None
    background_image: str | None = None
    background_material: Material | None = None
    offset: Point | None = None
    position: Point | None = None
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    decoration_color: Color | None = None

    @classmethod
    def from_css(
        cls, text: str, colors: SemanticColorProvider | None = None
    ) -> StyleSpec:
        """Parse an inline declaration string such as ``"color: red; padding: 4px"``."""
        from cssdecl.parser import parse_declarations

        return parse_declarations(text, colors=colors)

    @property
    def font(self) -> FontValue | None:
        """The font to render with, or None to keep the ambient default."""
        if self.font_size is None and self.font_weight is None and not self.italic:
            return None
        size = self.font_size or ScaledFontSize(TextStyle.BODY)
        return FontValue(size=size, weight=self.font_weight, italic=self.italic)

    @property
    def is_empty(self) -> bool:
        """True if no field differs from its default."""
        return self == StyleSpec()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-safe dict of the fields that are set.

        The boolean flags are always included.
        """
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.name] = _encode(value)
        return result


def _encode(value: object) -> object:
    if isinstance(value, RGBA):
        return {"rgba": [value.red, value.green, value.blue, value.opacity]}
    if isinstance(value, SemanticColor):
        return {"semantic": value.token}
    if isinstance(value, ScaledFontSize):
        return {"style": str(value.style)}
    if isinstance(value, FixedFontSize):
        return {"size": value.size}
    if isinstance(value, (FontWeight, Material)):
        return str(value)
    if isinstance(value, (Box, CornerRadii, Point)):
        return {f.name: getattr(value, f.name) for f in fields(value)}
    return value
