"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Sequence

from .document import BufferDocument
from .state import Cursor, Range


class BufferValidationError(RuntimeError):
    """Raised when callers provide out-of-bounds or conflicting positions."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    line = document.get_line(row)
    if col < 0 or col > len(line):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def ensure_disjoint(ranges: Sequence[Range]) -> None:
    ordered = sorted(ranges)
    for (_, previous_end), (start, _) in zip(ordered, ordered[1:]):
        if start < previous_end:
            raise BufferValidationError("Overlapping ranges", cursor=start)
