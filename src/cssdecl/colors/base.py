"""Semantic color provider protocol and the set of known tokens."""

from __future__ import annotations

from typing import Protocol

from cssdecl.model.color import Color

# Platform-neutral names of every semantic color the declaration language knows.
SEMANTIC_TOKENS: tuple[str, ...] = (
    "primary",
    "secondary",
    "systemBackground",
    "secondarySystemBackground",
    "tertiarySystemBackground",
    "systemGroupedBackground",
    "secondarySystemGroupedBackground",
    "tertiarySystemGroupedBackground",
    "label",
    "secondaryLabel",
    "tertiaryLabel",
    "quaternaryLabel",
    "link",
    "placeholderText",
    "separator",
    "opaqueSeparator",
    "systemBlue",
    "systemGreen",
    "systemIndigo",
    "systemOrange",
    "systemPink",
    "systemPurple",
    "systemRed",
    "systemTeal",
    "systemYellow",
    "systemGray",
    "systemGray2",
    "systemGray3",
    "systemGray4",
    "systemGray5",
    "systemGray6",
)


class SemanticColorProvider(Protocol):
    """Resolves semantic color tokens for one host platform."""

    def resolve(self, token: str) -> Color | None:
        """Return the color for *token*, or None if the platform has no equivalent."""
        ...
