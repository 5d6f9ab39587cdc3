"""Text sources that supply stylesheet text by resource name."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Mapping, Protocol

__all__ = ["TextSource", "DirectoryTextSource", "MappingTextSource"]

log = logging.getLogger("cssdecl.stylesheet")


class TextSource(Protocol):
    """Protocol for objects that return stylesheet text for a resource name."""

    def read(self, name: str) -> str | None:
        """Return the text for *name*, or None if it cannot be found."""
        ...


def _with_extension(name: str, default_extension: str) -> str:
    if PurePosixPath(name).suffix:
        return name
    return f"{name}.{default_extension}"


class DirectoryTextSource:
    """Reads ``<root>/<name>.<ext>`` files; *name* may carry its own extension."""

    def __init__(self, root: str | Path = ".", default_extension: str = "css") -> None:
        self.root = Path(root)
        self.default_extension = default_extension

    def read(self, name: str) -> str | None:
        path = self.root / _with_extension(name, self.default_extension)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.debug("Cannot read %s: %s", path, exc)
            return None


class MappingTextSource:
    """In-memory source keyed by file name, e.g. ``{"theme.css": "..."}``."""

    def __init__(self, files: Mapping[str, str], default_extension: str = "css") -> None:
        self.files = dict(files)
        self.default_extension = default_extension

    def read(self, name: str) -> str | None:
        return self.files.get(_with_extension(name, self.default_extension))
