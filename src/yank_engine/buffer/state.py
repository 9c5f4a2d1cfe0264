"""Cursor, selection, and range types plus per-view selection state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

Cursor = Tuple[int, int]  # (row, column)
Selection = Tuple[Cursor, Cursor]  # (anchor, active)
Range = Tuple[Cursor, Cursor]  # (start, end), start <= end


def selection_range(selection: Selection) -> Range:
    anchor, active = selection
    if anchor <= active:
        return anchor, active
    return active, anchor


def is_empty(selection: Selection) -> bool:
    return selection[0] == selection[1]


def active_positions(selections: Sequence[Selection]) -> List[Cursor]:
    return [active for _anchor, active in selections]


@dataclass(slots=True)
class BufferState:
    """Mutable selection set; the first selection is the primary one."""

    selections: List[Selection] = field(default_factory=lambda: [((0, 0), (0, 0))])

    @property
    def cursor(self) -> Cursor:
        return self.selections[0][1]

    def set_cursor(self, row: int, col: int) -> None:
        self.selections = [((row, col), (row, col))]

    def set_cursors(self, cursors: Sequence[Cursor]) -> None:
        self.selections = [(cursor, cursor) for cursor in cursors] or [((0, 0), (0, 0))]

    def set_selection(self, anchor: Cursor, active: Cursor) -> None:
        self.selections = [(anchor, active)]

    def set_selections(self, selections: Sequence[Selection]) -> None:
        self.selections = list(selections) or [((0, 0), (0, 0))]
