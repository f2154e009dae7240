"""Mutable text buffer and the str/buffer boundary helpers."""

from .buffer import TextBuffer
from .sync import BufferEdit, Text, apply_edit, read_text
from .validation import TextRangeError, ensure_char, ensure_span, ensure_width

__all__ = [
    "TextBuffer",
    "Text",
    "BufferEdit",
    "apply_edit",
    "read_text",
    "TextRangeError",
    "ensure_char",
    "ensure_span",
    "ensure_width",
]
