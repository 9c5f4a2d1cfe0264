"""Notification streams a host raises for document and selection changes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Tuple, TypeVar

from yank_engine.buffer.state import Selection

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DocumentChangeEvent:
    document_id: str


@dataclass(frozen=True, slots=True)
class SelectionChangeEvent:
    editor_id: str
    selections: Tuple[Selection, ...] = ()


class Subscription:
    """Handle returned by ``EventStream.subscribe``; ``dispose`` detaches it."""

    def __init__(
        self, stream: "EventStream[Any]", callback: Callable[[Any], None]
    ) -> None:
        self._stream = stream
        self._callback = callback
        self.disposed = False

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        self._stream._detach(self._callback)


class EventStream(Generic[T]):
    """Synchronous fan-out of one payload type to registered callbacks."""

    def __init__(self) -> None:
        self._subscribers: List[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        self._subscribers.append(callback)
        return Subscription(self, callback)

    def emit(self, payload: T) -> None:
        for callback in list(self._subscribers):
            callback(payload)

    def _detach(self, callback: Callable[[T], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def __len__(self) -> int:
        return len(self._subscribers)


__all__ = [
    "DocumentChangeEvent",
    "EventStream",
    "SelectionChangeEvent",
    "Subscription",
]
