"""In-memory host used by tests and by embedders with their own text model."""

from .editor import BufferEditor, MemoryClipboard, MemoryWorkspace

__all__ = ["BufferEditor", "MemoryClipboard", "MemoryWorkspace"]
