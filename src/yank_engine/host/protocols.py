"""Contracts the yank engine expects from a host editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol, Sequence

from yank_engine.buffer.state import Cursor, Range, Selection

from .events import DocumentChangeEvent, EventStream, SelectionChangeEvent


class TextEditor(Protocol):
    """One editor view onto a document."""

    @property
    def editor_id(self) -> str:
        """Identity of the view; selection events carry it."""
        ...

    @property
    def document_id(self) -> str:
        """Identity of the underlying document; change events carry it."""
        ...

    @property
    def selections(self) -> Sequence[Selection]:
        """Ordered ``(anchor, active)`` pairs, primary selection first."""
        ...

    def get_text(self, text_range: Range) -> str:
        ...

    @property
    def line_count(self) -> int:
        ...

    def line_text(self, row: int) -> str:
        """Text of line ``row`` without its line break."""
        ...

    async def edit(
        self,
        deletions: Sequence[Range],
        insertions: Sequence[tuple[Cursor, str]] = (),
    ) -> bool:
        """Apply the edit as one undoable transaction; ``False`` if rejected."""
        ...

    async def undo(self) -> None:
        """Reverse exactly one prior transaction."""
        ...

    async def paste(self, text: str) -> None:
        """Insert ``text`` at the selections using the host's paste behaviour."""
        ...

    async def native_paste(self) -> None:
        """Run the host's own clipboard paste action."""
        ...


class Clipboard(Protocol):
    async def read_text(self) -> str:
        ...

    async def write_text(self, text: str) -> None:
        ...


def _ignore_message(_message: str) -> None:
    return None


@dataclass(slots=True)
class HostContext:
    """Services shared by every editor view of one host."""

    clipboard: Clipboard
    document_changes: EventStream[DocumentChangeEvent] = field(
        default_factory=EventStream
    )
    selection_changes: EventStream[SelectionChangeEvent] = field(
        default_factory=EventStream
    )
    show_message: Callable[[str], None] = _ignore_message


__all__ = ["Clipboard", "HostContext", "TextEditor"]
