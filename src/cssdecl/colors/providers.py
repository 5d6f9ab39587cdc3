"""Built-in semantic color providers."""

from __future__ import annotations

from typing import Callable, Mapping

from cssdecl.colors.base import SEMANTIC_TOKENS, SemanticColorProvider
from cssdecl.colors.palettes import APPKIT_PALETTE, UIKIT_PALETTE
from cssdecl.errors import UnknownPlatformError
from cssdecl.model.color import RGBA, Color, SemanticColor


class DeferredColorProvider:
    """Returns a :class:`SemanticColor` handle for every known token.

    This is the default: the style keeps the token name and the renderer
    resolves it against the live platform appearance.
    """

    def resolve(self, token: str) -> Color | None:
        if token in SEMANTIC_TOKENS:
            return SemanticColor(token)
        return None


class PaletteColorProvider:
    """Resolves tokens from a fixed token -> RGBA palette."""

    def __init__(self, name: str, palette: Mapping[str, RGBA]) -> None:
        self.name = name
        self._palette = dict(palette)

    def resolve(self, token: str) -> Color | None:
        return self._palette.get(token)

    def __repr__(self) -> str:
        return f"PaletteColorProvider({self.name!r}, {len(self._palette)} colors)"


class NullColorProvider:
    """A platform without system colors: nothing resolves."""

    def resolve(self, token: str) -> Color | None:
        return None


_PLATFORMS: dict[str, Callable[[], SemanticColorProvider]] = {
    "deferred": DeferredColorProvider,
    "uikit": lambda: PaletteColorProvider("uikit", UIKIT_PALETTE),
    "appkit": lambda: PaletteColorProvider("appkit", APPKIT_PALETTE),
    "none": NullColorProvider,
}

PLATFORMS = tuple(_PLATFORMS)


def get_color_provider(platform: str) -> SemanticColorProvider:
    """Return the provider for *platform* (case-insensitive).

    Raises:
        UnknownPlatformError: If the platform name is not recognized.
    """
    factory = _PLATFORMS.get(platform.lower())
    if factory is None:
        raise UnknownPlatformError(platform, list(_PLATFORMS))
    return factory()
