"""Textual host: a TextArea-backed editor and a demo application."""

from .host import TextAreaEditor

__all__ = ["TextAreaEditor"]
