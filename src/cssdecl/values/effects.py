"""Material, offset/position and text-decoration parsing."""

from __future__ import annotations

from cssdecl.model.font import Material
from cssdecl.model.geometry import Point
from cssdecl.values.length import parse_lengths

__all__ = ["parse_material", "parse_offset", "parse_position", "parse_text_decoration"]

_MATERIALS: dict[str, Material] = {"bar": Material.BAR}
for _material in Material:
    if _material is Material.BAR:
        continue
    _MATERIALS[f"{_material.value}-material"] = _material
    _MATERIALS[f"{_material.value}material".replace("-", "")] = _material


def parse_material(value: str) -> Material | None:
    """Parse e.g. ``regular-material``, ``ultrathinmaterial`` or ``bar``."""
    return _MATERIALS.get(value)


def _parse_pair(value: str) -> Point | None:
    values = parse_lengths(value)
    if len(values) != 2:
        return None
    return Point(x=values[0], y=values[1])


def parse_offset(value: str) -> Point | None:
    """Parse ``x y``; exactly two lengths are required."""
    return _parse_pair(value)


def parse_position(value: str) -> Point | None:
    """Parse ``x y``; exactly two lengths are required."""
    return _parse_pair(value)


def parse_text_decoration(value: str) -> tuple[bool, bool]:
    """Return ``(underline, strikethrough)`` for a ``text-decoration`` value.

    Matching is by substring, so ``underline line-through`` sets both.
    """
    return "underline" in value, "line-through" in value
