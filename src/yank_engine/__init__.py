"""UI-agnostic Emacs-style kill ring and yank engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "host",
    "killring",
    "runtime",
    "session",
    "yank",
]

__version__ = "0.1.0"
