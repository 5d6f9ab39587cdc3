"""Geometry values: four-sided boxes, corner radii, and points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """Insets for the four sides of a rectangle, in logical pixels.

    ``start`` and ``end`` are the leading and trailing edges.  CSS ``left``
    maps to ``start`` and ``right`` to ``end`` (left-to-right layout only).
    """

    top: float
    start: float
    end: float
    bottom: float

    @classmethod
    def uniform(cls, value: float) -> Box:
        return cls(top=value, start=value, end=value, bottom=value)


@dataclass(frozen=True)
class CornerRadii:
    """Radii for the four corners of a rectangle."""

    start_top: float
    end_top: float
    end_bottom: float
    start_bottom: float

    @classmethod
    def uniform(cls, value: float) -> CornerRadii:
        return cls(start_top=value, end_top=value, end_bottom=value, start_bottom=value)


@dataclass(frozen=True)
class Point:
    x: float
    y: float
