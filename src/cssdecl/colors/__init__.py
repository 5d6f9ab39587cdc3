from cssdecl.colors.base import SEMANTIC_TOKENS, SemanticColorProvider
from cssdecl.colors.palettes import APPKIT_PALETTE, UIKIT_PALETTE
from cssdecl.colors.providers import (
    PLATFORMS,
    DeferredColorProvider,
    NullColorProvider,
    PaletteColorProvider,
    get_color_provider,
)

__all__ = [
    "SEMANTIC_TOKENS",
    "SemanticColorProvider",
    "UIKIT_PALETTE",
    "APPKIT_PALETTE",
    "PLATFORMS",
    "DeferredColorProvider",
    "PaletteColorProvider",
    "NullColorProvider",
    "get_color_provider",
]
