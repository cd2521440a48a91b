"""Host document abstraction.

The resolver only needs three things from an editor buffer: the full text, the
text of one line and the word under a cursor. `TextDocument` captures that
surface so the pipeline can run against any host, and `SourceDocument` is the
in-memory implementation used by the CLI, the HTTP API and the tests.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol, runtime_checkable

from smartci.core.models import Position

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_WORD_RE = re.compile(r"[A-Za-z0-9_$]+")


class DocumentLoadError(Exception):
    """Raised when the active document itself cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read document {path}: {reason}")


@runtime_checkable
class TextDocument(Protocol):
    """Minimal read-only view of an editor document."""

    def get_text(self) -> str: ...

    def line_at(self, line: int) -> str: ...

    def word_range_at(self, position: Position) -> tuple[int, int] | None: ...


class SourceDocument:
    """In-memory document built from source text."""

    def __init__(self, text: str, path: Path | None = None) -> None:
        self._text = text
        self._lines = _LINE_SPLIT_RE.split(text)
        self.path = path

    @classmethod
    def from_path(cls, path: Path) -> SourceDocument:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug(f"Failed to read document {path}: {exc}")
            raise DocumentLoadError(path, str(exc)) from exc
        return cls(text, path=path)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_text(self) -> str:
        return self._text

    def line_at(self, line: int) -> str:
        if 0 <= line < len(self._lines):
            return self._lines[line]
        return ""

    def word_range_at(self, position: Position) -> tuple[int, int] | None:
        """Return the (start, end) columns of the word touching the cursor.

        A cursor placed right after the last character of a word still counts
        as being on that word, matching editor behaviour.
        """
        text = self.line_at(position.line)
        for match in _WORD_RE.finditer(text):
            if match.start() <= position.character <= match.end():
                return match.start(), match.end()
        return None

    def __repr__(self) -> str:
        return f"SourceDocument(path={self.path!r}, lines={len(self._lines)})"
