"""TextEditor implementation over a Textual ``TextArea`` widget."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple

from textual.widgets import TextArea

from yank_engine.buffer.state import Cursor, Range, Selection
from yank_engine.host import DocumentChangeEvent, HostContext, SelectionChangeEvent
from yank_engine.runtime import telemetry


class TextAreaEditor:
    """Adapts a single-selection ``TextArea`` to the yank engine.

    Edits issued by the engine run with the widget's own ``Changed`` and
    ``SelectionChanged`` messages suppressed; the adapter publishes exactly one
    document-change notification per engine operation instead, so one paste
    maps to one undo batch. User edits reach the engine through
    ``forward_changed`` and ``forward_selection_changed``, which the hosting
    app calls from its message handlers.
    """

    def __init__(
        self,
        text_area: TextArea,
        host: HostContext,
        *,
        editor_id: Optional[str] = None,
        document_id: Optional[str] = None,
    ) -> None:
        self.text_area = text_area
        self.host = host
        self._editor_id = editor_id or text_area.id or f"text-area-{id(text_area)}"
        self._document_id = document_id or self._editor_id

    @property
    def editor_id(self) -> str:
        return self._editor_id

    @property
    def document_id(self) -> str:
        return self._document_id

    @property
    def selections(self) -> Sequence[Selection]:
        selection = self.text_area.selection
        anchor: Cursor = (selection.start[0], selection.start[1])
        active: Cursor = (selection.end[0], selection.end[1])
        return ((anchor, active),)

    @property
    def line_count(self) -> int:
        return self.text_area.document.line_count

    def line_text(self, row: int) -> str:
        return self.text_area.document.get_line(row)

    def get_text(self, text_range: Range) -> str:
        start, end = text_range
        return self.text_area.get_text_range(start, end)

    async def edit(
        self,
        deletions: Sequence[Range],
        insertions: Sequence[tuple[Cursor, str]] = (),
    ) -> bool:
        operations: List[Tuple[Cursor, Cursor, str]] = [
            (start, end, "") for start, end in deletions
        ]
        operations.extend((position, position, text) for position, text in insertions)
        operations.sort(key=lambda op: (op[0], op[1]))
        reason = self._rejection(operations)
        if reason is not None:
            telemetry.record_event(
                "textual.edit_rejected",
                level="warning",
                data={"editor": self.editor_id, "reason": reason},
            )
            return False
        with self._engine_change():
            for start, end, text in reversed(operations):
                self.text_area.replace(text, start, end)
        return True

    async def undo(self) -> None:
        with self._engine_change(checkpoint=False):
            self.text_area.undo()

    async def paste(self, text: str) -> None:
        selection = self.text_area.selection
        start, end = sorted((selection.start, selection.end))
        with self._engine_change():
            result = self.text_area.replace(text, start, end)
            self.text_area.move_cursor(result.end_location)

    async def native_paste(self) -> None:
        await self.paste(await self.host.clipboard.read_text())

    def forward_changed(self) -> None:
        self.host.document_changes.emit(DocumentChangeEvent(self.document_id))

    def forward_selection_changed(self) -> None:
        self.host.selection_changes.emit(
            SelectionChangeEvent(self.editor_id, tuple(self.selections))
        )

    def _rejection(
        self, operations: Sequence[Tuple[Cursor, Cursor, str]]
    ) -> Optional[str]:
        if self.text_area.read_only:
            return "read-only"
        document = self.text_area.document
        for start, end, _text in operations:
            for row, col in (start, end):
                if not 0 <= row < document.line_count:
                    return "row out of range"
                if not 0 <= col <= len(document.get_line(row)):
                    return "column out of range"
            if start > end:
                return "range start after end"
        return None

    @contextmanager
    def _engine_change(self, *, checkpoint: bool = True) -> Iterator[None]:
        before = tuple(self.selections)
        if checkpoint:
            self.text_area.history.checkpoint()
        with self.text_area.prevent(TextArea.Changed, TextArea.SelectionChanged):
            yield
        if checkpoint:
            self.text_area.history.checkpoint()
        self.forward_changed()
        if tuple(self.selections) != before:
            self.forward_selection_changed()


__all__ = ["TextAreaEditor"]
