"""Host editor boundary: protocols, notification streams, shared services."""

from .events import DocumentChangeEvent, EventStream, SelectionChangeEvent, Subscription
from .protocols import Clipboard, HostContext, TextEditor

__all__ = [
    "Clipboard",
    "DocumentChangeEvent",
    "EventStream",
    "HostContext",
    "SelectionChangeEvent",
    "Subscription",
    "TextEditor",
]
