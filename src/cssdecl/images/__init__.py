"""Background-image resolution: icon symbol or bitmap asset."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Protocol

from cssdecl.model.style import StyleSpec

__all__ = [
    "ImageKind",
    "ImageReference",
    "ImageResolver",
    "SymbolCatalogResolver",
    "DottedNameResolver",
    "resolve_background_image",
]


class ImageKind(StrEnum):
    SYMBOL = "symbol"
    ASSET = "asset"


@dataclass(frozen=True)
class ImageReference:
    name: str
    kind: ImageKind


class ImageResolver(Protocol):
    """Decides whether an image name refers to a symbol or an asset."""

    def resolve(self, name: str) -> ImageReference: ...


class SymbolCatalogResolver:
    """Treats *name* as a symbol when it is in a known catalog of symbol names."""

    def __init__(self, symbols: Iterable[str]) -> None:
        self.symbols = frozenset(symbols)

    def resolve(self, name: str) -> ImageReference:
        kind = ImageKind.SYMBOL if name in self.symbols else ImageKind.ASSET
        return ImageReference(name=name, kind=kind)


class DottedNameResolver:
    """Heuristic for platforms without a symbol catalog.

    Symbol names are conventionally dotted (``star.fill``); this gives false
    positives for asset names containing a dot.
    """

    def resolve(self, name: str) -> ImageReference:
        kind = ImageKind.SYMBOL if "." in name else ImageKind.ASSET
        return ImageReference(name=name, kind=kind)


def resolve_background_image(
    style: StyleSpec, resolver: ImageResolver
) -> ImageReference | None:
    """Resolve the style's ``background-image``, or None when it has none."""
    if not style.background_image:
        return None
    return resolver.resolve(style.background_image)
