"""Textual ``TextArea`` integration."""

from .controller import TextAreaLineSource, TextualCursorBridge

__all__ = ["TextAreaLineSource", "TextualCursorBridge"]
