"""Linear undo history for buffer transactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .state import Selection


@dataclass(slots=True)
class UndoEntry:
    label: str
    before_text: str
    selections_before: Tuple[Selection, ...]


class UndoTimeline:
    """Stack of committed transactions; undone entries are discarded."""

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []

    def push(self, entry: UndoEntry) -> None:
        self._entries.append(entry)

    def undo(self) -> Optional[UndoEntry]:
        if not self._entries:
            return None
        return self._entries.pop()

    def __len__(self) -> int:
        return len(self._entries)
