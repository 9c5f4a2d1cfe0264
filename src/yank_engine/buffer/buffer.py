"""In-memory buffer façade combining document, selections, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, List, Optional, Sequence, Tuple

from yank_engine.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor, Range, Selection
from .undo import UndoEntry, UndoTimeline
from .validation import BufferValidationError, ensure_cursor, ensure_disjoint

Insertion = Tuple[Cursor, str]
Operation = Tuple[int, int, str]  # (start offset, end offset, inserted text)


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    selections: Tuple[Selection, ...]
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        history: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.history = history or UndoTimeline()
        self._listeners: List[Callable[[BufferDelta], None]] = []

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def text(self) -> str:
        return self.document.text

    def subscribe(self, callback: Callable[[BufferDelta], None]) -> Callable[[], None]:
        """Call ``callback`` after every committed change; returns an unsubscriber."""

        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def get_text_range(self, start: Cursor, end: Cursor) -> str:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        text = self.document.text
        return text[self.document.offset_of(start) : self.document.offset_of(end)]

    def apply_edit(
        self,
        deletions: Sequence[Range],
        insertions: Sequence[Insertion] = (),
        *,
        label: str = "edit",
    ) -> BufferDelta:
        """Apply every deletion and insertion as one undoable transaction.

        Positions refer to the document before the edit. Insertions sharing a
        position keep their given order; an insertion at the start of a
        deletion lands where the deleted text was.
        """

        operations = self._plan(deletions, insertions)
        with Transaction(self, label) as tx:
            before_text = self.document.text
            after_text = before_text
            for start, end, inserted in reversed(operations):
                after_text = after_text[:start] + inserted + after_text[end:]

            offsets = [
                (
                    _map_offset(self.document.offset_of(anchor), operations),
                    _map_offset(self.document.offset_of(active), operations),
                )
                for anchor, active in self.state.selections
            ]
            self.document = self.document.with_text(after_text)
            self.state.set_selections(
                [
                    (
                        self.document.position_of(anchor),
                        self.document.position_of(active),
                    )
                    for anchor, active in offsets
                ]
            )
            tx.commit(before_text)

        return self._notify(label)

    def insert_text(self, text: str, *, cursor: Optional[Cursor] = None) -> BufferDelta:
        position = cursor or self.state.cursor
        return self.apply_edit([], [(position, text)], label="insert_text")

    def delete_range(self, start: Cursor, end: Cursor) -> BufferDelta:
        return self.apply_edit([(start, end)], label="delete_range")

    def undo(self) -> Optional[BufferDelta]:
        entry = self.history.undo()
        if entry is None:
            return None
        with telemetry.span(
            name="buffer::undo",
            component=True,
            metadata={"buffer": self.name, "label": entry.label},
        ):
            self.document = self.document.with_text(entry.before_text)
            self.state.set_selections(entry.selections_before)
        return self._notify("undo")

    def _plan(
        self, deletions: Sequence[Range], insertions: Sequence[Insertion]
    ) -> List[Operation]:
        document = self.document
        for start, end in deletions:
            ensure_cursor(document, start)
            ensure_cursor(document, end)
            if start > end:
                raise BufferValidationError("Range start after end", cursor=start)
        ensure_disjoint(deletions)

        operations: List[Operation] = [
            (document.offset_of(start), document.offset_of(end), "")
            for start, end in deletions
        ]
        for position, text in insertions:
            offset = document.offset_of(ensure_cursor(document, position))
            for start, end, _ in operations:
                if start < offset < end:
                    raise BufferValidationError(
                        "Insertion inside a deleted range", cursor=position
                    )
            operations.append((offset, offset, text))
        return sorted(operations, key=lambda op: (op[0], op[1]))

    def _notify(self, label: str) -> BufferDelta:
        delta = BufferDelta(
            version=self.document.version,
            text=self.document.text,
            selections=tuple(self.state.selections),
            label=label,
        )
        for callback in list(self._listeners):
            callback(delta)
        return delta


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._selections_before: Tuple[Selection, ...] = ()

    def __enter__(self) -> "Transaction":
        self._selections_before = tuple(self.buffer.state.selections)
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self, before_text: str) -> None:
        entry = UndoEntry(
            label=self.label,
            before_text=before_text,
            selections_before=self._selections_before,
        )
        self.buffer.history.push(entry)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _map_offset(offset: int, operations: Sequence[Operation]) -> int:
    shift = 0
    for start, end, inserted in operations:
        if end <= offset:
            shift += len(inserted) - (end - start)
        elif start < offset:
            return start + shift + len(inserted)
        else:
            break
    return offset + shift
