"""Color values: literal RGBA colors and deferred semantic color handles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGBA:
    """An opaque or translucent color with channels in the range [0, 1]."""

    red: float
    green: float
    blue: float
    opacity: float = 1.0

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int = 255) -> RGBA:
        """Build a color from 0-255 channel values."""
        return cls(red / 255, green / 255, blue / 255, alpha / 255)

    def to_hex(self) -> str:
        """Return ``#rrggbb`` (or ``#rrggbbaa`` when not fully opaque).

        Channels outside 0..1 are clamped so the result is always valid hex.
        """
        channels = [self.red, self.green, self.blue]
        if self.opacity != 1.0:
            channels.append(self.opacity)
        octets = (max(0, min(255, round(c * 255))) for c in channels)
        return "#" + "".join(f"{o:02x}" for o in octets)


@dataclass(frozen=True)
class SemanticColor:
    """A platform color referenced by name, e.g. ``systemBlue`` or ``label``.

    The concrete value depends on the host platform and appearance, so
    resolving it is left to whoever renders the style.
    """

    token: str


Color = RGBA | SemanticColor
