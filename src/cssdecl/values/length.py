"""Length and decimal number parsing."""

from __future__ import annotations

import math
import re

__all__ = ["LENGTH_UNITS", "parse_number", "parse_length", "parse_lengths"]

# Both units are treated as logical pixels; no conversion is applied.
LENGTH_UNITS = ("px", "pt")

_NUMBER_RE = re.compile(
    r"""
    [+-]?
    (?: \d+ (?:\.\d*)? | \.\d+ )   # integer or decimal part
    (?: [eE][+-]?\d+ )?            # optional exponent
    """,
    re.VERBOSE,
)


def parse_number(token: str) -> float | None:
    """Parse a plain finite decimal number, or return None."""
    if _NUMBER_RE.fullmatch(token) is None:
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def parse_length(token: str) -> float | None:
    """Parse a length such as ``12``, ``12px`` or ``1.5pt``.

    Returns None when the token is not numeric.
    """
    for unit in LENGTH_UNITS:
        if token.endswith(unit):
            value = parse_number(token[: -len(unit)].strip())
            if value is not None:
                return value
    return parse_number(token)


def parse_lengths(value: str) -> list[float]:
    """Split *value* on single spaces and keep the tokens that parse as lengths."""
    lengths: list[float] = []
    for token in value.split(" "):
        length = parse_length(token)
        if length is not None:
            lengths.append(length)
    return lengths
