"""Four-value shorthand expansion for boxes and corner radii.

Both follow the CSS positional rules for one to four values.  ``left`` and
``right`` are mapped to ``start`` and ``end`` assuming left-to-right layout.
"""

from __future__ import annotations

from cssdecl.model.geometry import Box, CornerRadii
from cssdecl.values.length import parse_lengths

__all__ = ["parse_box", "parse_corner_radii"]


def parse_box(value: str) -> Box | None:
    """Expand a ``padding``/``margin``/``border-width`` value.

    CSS order is top, right, bottom, left.  Returns None unless one to four
    lengths are present.
    """
    values = parse_lengths(value)
    if len(values) == 1:
        return Box.uniform(values[0])
    if len(values) == 2:
        vertical, horizontal = values
        return Box(top=vertical, start=horizontal, end=horizontal, bottom=vertical)
    if len(values) == 3:
        top, horizontal, bottom = values
        return Box(top=top, start=horizontal, end=horizontal, bottom=bottom)
    if len(values) == 4:
        top, right, bottom, left = values
        return Box(top=top, start=left, end=right, bottom=bottom)
    return None


def parse_corner_radii(value: str) -> CornerRadii | None:
    """Expand a ``border-radius`` value.

    CSS order is top-left, top-right, bottom-right, bottom-left.
    """
    values = parse_lengths(value)
    if len(values) == 1:
        return CornerRadii.uniform(values[0])
    if len(values) == 2:
        tl_br, tr_bl = values
        return CornerRadii(
            start_top=tl_br, end_top=tr_bl, end_bottom=tl_br, start_bottom=tr_bl
        )
    if len(values) == 3:
        tl, tr_bl, br = values
        return CornerRadii(start_top=tl, end_top=tr_bl, end_bottom=br, start_bottom=tr_bl)
    if len(values) == 4:
        tl, tr, br, bl = values
        return CornerRadii(start_top=tl, end_top=tr, end_bottom=br, start_bottom=bl)
    return None
