"""List-of-lines text storage used by the in-memory host."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .state import Cursor


@dataclass(slots=True)
class BufferDocument:
    """Immutable-ish text storage; every change produces a new version.

    Positions are ``(row, column)`` pairs and offsets count one character per
    line break.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=version)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def with_text(self, text: str) -> "BufferDocument":
        """Return a document holding ``text`` with the version bumped."""

        return BufferDocument.from_text(text, version=self.version + 1)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def offset_of(self, cursor: Cursor) -> int:
        row, col = cursor
        return sum(len(line) + 1 for line in self._lines[:row]) + col

    def position_of(self, offset: int) -> Cursor:
        running = 0
        for row, line in enumerate(self._lines):
            if offset <= running + len(line):
                return (row, offset - running)
            running += len(line) + 1
        return (len(self._lines) - 1, len(self._lines[-1]))
