"""TextEditor implementation over ``yank_engine.buffer.Buffer``."""

from __future__ import annotations

import itertools
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from yank_engine.buffer import (
    Buffer,
    BufferDelta,
    BufferValidationError,
    Cursor,
    Range,
    Selection,
)
from yank_engine.buffer.state import is_empty, selection_range
from yank_engine.host import DocumentChangeEvent, HostContext, SelectionChangeEvent
from yank_engine.runtime import telemetry


class MemoryClipboard:
    """Process-local clipboard; ``text`` may be set directly to mimic other apps."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    async def read_text(self) -> str:
        return self.text

    async def write_text(self, text: str) -> None:
        self.text = text


class MemoryWorkspace:
    """Owns the shared streams, clipboard, and message log for in-memory editors."""

    def __init__(self, clipboard: Optional[MemoryClipboard] = None) -> None:
        self.clipboard = clipboard or MemoryClipboard()
        self.messages: List[str] = []
        self.context = HostContext(
            clipboard=self.clipboard,
            show_message=self.messages.append,
        )
        self.editors: Dict[str, "BufferEditor"] = {}
        self._numbers = itertools.count(1)

    def open(
        self,
        text: str = "",
        *,
        name: Optional[str] = None,
        format_on_paste: Optional[Callable[[Buffer], None]] = None,
    ) -> "BufferEditor":
        buffer = Buffer.from_text(text, name=name or f"buffer-{next(self._numbers)}")
        editor = BufferEditor(buffer, self.context, format_on_paste=format_on_paste)
        self.editors[editor.editor_id] = editor
        return editor

    def close(self, editor: "BufferEditor") -> None:
        self.editors.pop(editor.editor_id, None)
        editor.close()


class BufferEditor:
    """Single view onto a ``Buffer`` that reports changes to a ``HostContext``.

    ``reject_edits`` makes the next N calls to ``edit`` fail, which is how a
    host rejecting an edit transiently looks to the yanker.
    ``format_on_paste`` runs after ``paste`` and may edit the buffer again,
    like an editor re-indenting pasted code.
    """

    def __init__(
        self,
        buffer: Buffer,
        host: HostContext,
        *,
        editor_id: Optional[str] = None,
        format_on_paste: Optional[Callable[[Buffer], None]] = None,
    ) -> None:
        self.buffer = buffer
        self.host = host
        self._editor_id = editor_id or f"{buffer.name}:view"
        self.format_on_paste = format_on_paste
        self.reject_edits = 0
        self._last_selections: Tuple[Selection, ...] = tuple(buffer.state.selections)
        self._unsubscribe = buffer.subscribe(self._on_buffer_change)

    @property
    def editor_id(self) -> str:
        return self._editor_id

    @property
    def document_id(self) -> str:
        return self.buffer.name

    @property
    def selections(self) -> Sequence[Selection]:
        return tuple(self.buffer.state.selections)

    @property
    def text(self) -> str:
        return self.buffer.text

    def get_text(self, text_range: Range) -> str:
        start, end = text_range
        return self.buffer.get_text_range(start, end)

    @property
    def line_count(self) -> int:
        return self.buffer.document.line_count

    def line_text(self, row: int) -> str:
        return self.buffer.document.get_line(row)

    async def edit(
        self,
        deletions: Sequence[Range],
        insertions: Sequence[tuple[Cursor, str]] = (),
    ) -> bool:
        if self.reject_edits > 0:
            self.reject_edits -= 1
            return False
        try:
            self.buffer.apply_edit(deletions, insertions, label="edit")
        except BufferValidationError as exc:
            telemetry.record_event(
                "memory.edit_rejected",
                level="warning",
                data={"buffer": self.buffer.name, "reason": str(exc)},
            )
            return False
        return True

    async def undo(self) -> None:
        self.buffer.undo()

    async def paste(self, text: str) -> None:
        selections = self.buffer.state.selections
        deletions = [
            selection_range(selection)
            for selection in selections
            if not is_empty(selection)
        ]
        insertions = [(selection_range(selection)[0], text) for selection in selections]
        self.buffer.apply_edit(deletions, insertions, label="paste")
        if self.format_on_paste is not None:
            self.format_on_paste(self.buffer)

    async def native_paste(self) -> None:
        await self.paste(await self.host.clipboard.read_text())

    # Simulated user activity -------------------------------------------------

    def type_text(self, text: str) -> None:
        self.buffer.insert_text(text)

    def move_cursor(self, row: int, col: int) -> None:
        self.buffer.state.set_cursor(row, col)
        self._publish_selection()

    def set_cursors(self, cursors: Sequence[Cursor]) -> None:
        self.buffer.state.set_cursors(cursors)
        self._publish_selection()

    def select(self, anchor: Cursor, active: Cursor) -> None:
        self.buffer.state.set_selection(anchor, active)
        self._publish_selection()

    def set_selections(self, selections: Sequence[Selection]) -> None:
        self.buffer.state.set_selections(selections)
        self._publish_selection()

    def close(self) -> None:
        self._unsubscribe()

    def _on_buffer_change(self, delta: BufferDelta) -> None:
        self.host.document_changes.emit(DocumentChangeEvent(self.document_id))
        if delta.selections != self._last_selections:
            self._publish_selection()

    def _publish_selection(self) -> None:
        self._last_selections = tuple(self.buffer.state.selections)
        self.host.selection_changes.emit(
            SelectionChangeEvent(self.editor_id, self._last_selections)
        )


__all__ = ["BufferEditor", "MemoryClipboard", "MemoryWorkspace"]
