"""StyleSheet: a registry of named style classes and their raw declarations.

Syntax example:
    /* shared card chrome */
    .card, .panel { padding: 20px; border-radius: 16px; }
    .card-title  { font-size: title3; font-weight: semibold; }

The registry stores declaration text verbatim and re-parses on every
resolution.  It does no locking: callers must serialize writers, and readers
are only safe while no writer is active.
"""

from __future__ import annotations

import logging
from typing import Iterable

from cssdecl.colors.base import SemanticColorProvider
from cssdecl.model.style import StyleSpec
from cssdecl.parser import parse_declarations
from cssdecl.stylesheet.source import TextSource

__all__ = ["StyleSheet", "strip_comments", "split_class_names"]

log = logging.getLogger("cssdecl.stylesheet")


def _normalize(name: str) -> str:
    return name.removeprefix(".")


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` comments (not nested).

    An unterminated ``/*`` is left in place along with everything after it.
    """
    parts: list[str] = []
    pos = 0
    while True:
        start = text.find("/*", pos)
        if start == -1:
            break
        end = text.find("*/", start + 2)
        if end == -1:
            break
        parts.append(text[pos:start])
        pos = end + 2
    parts.append(text[pos:])
    return "".join(parts)


def split_class_names(names: str) -> list[str]:
    """Split a space-separated class attribute like ``"card card-title"``."""
    return [name for name in names.split(" ") if name.strip()]


class StyleSheet:
    """Mutable mapping from class name to raw declaration text."""

    def __init__(self) -> None:
        self._classes: dict[str, str] = {}

    @classmethod
    def from_source(cls, text: str) -> StyleSheet:
        """Build a stylesheet from block-structured source text."""
        sheet = cls()
        sheet.parse(text)
        return sheet

    def define(self, name: str, css: str) -> None:
        """Register *css* under *name* (a leading ``.`` is ignored), replacing any previous entry."""
        self._classes[_normalize(name)] = css

    def css(self, name: str) -> str | None:
        return self._classes.get(_normalize(name))

    def names(self) -> list[str]:
        """Class names in definition order."""
        return list(self._classes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize(name) in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def resolve(self, names: Iterable[str]) -> str:
        """Concatenate the declarations of *names* in order, skipping unknown names.

        Parsing the result lets classes later in the list override earlier ones.
        """
        resolved: list[str] = []
        for name in names:
            css = self.css(name)
            if css is None:
                log.debug("Unknown style class %r", name)
                continue
            resolved.append(css)
        return "; ".join(resolved)

    def style(
        self,
        names: str | Iterable[str],
        colors: SemanticColorProvider | None = None,
    ) -> StyleSpec:
        """Resolve *names* (a list or a space-separated string) into a StyleSpec."""
        if isinstance(names, str):
            names = split_class_names(names)
        return parse_declarations(self.resolve(names), colors=colors)

    def parse(self, text: str) -> None:
        """Register every rule in block-structured stylesheet *text*.

        Comma-separated selectors share the same body.  Blocks that are not
        exactly ``selectors { body }``, or whose selectors or body are empty,
        are skipped.
        """
        for block in strip_comments(text).split("}"):
            parts = block.split("{")
            if len(parts) != 2:
                if block.strip():
                    log.debug("Skipping malformed block %r", block.strip())
                continue
            selectors, body = parts[0].strip(), parts[1].strip()
            if not selectors or not body:
                continue
            for selector in selectors.split(","):
                name = selector.strip()
                if name:
                    self.define(name, body)

    def load(self, name: str, source: TextSource) -> bool:
        """Read *name* from *source* and parse it.

        Returns False (after logging a warning) when the source has no such
        resource; the registry is left untouched in that case.
        """
        text = source.read(name)
        if text is None:
            log.warning("StyleSheet: could not load %r", name)
            return False
        self.parse(text)
        log.debug("Loaded %r (%d classes defined)", name, len(self))
        return True
