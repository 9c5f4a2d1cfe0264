"""In-memory text buffer with multi-selection state and undo."""

from .buffer import Buffer, BufferDelta, Insertion, Transaction
from .document import BufferDocument
from .state import BufferState, Cursor, Range, Selection
from .undo import UndoEntry, UndoTimeline
from .validation import BufferValidationError, ensure_cursor, ensure_disjoint

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "Cursor",
    "Insertion",
    "Range",
    "Selection",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "ensure_cursor",
    "ensure_disjoint",
]
