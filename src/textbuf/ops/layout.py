"""Line breaking: whitespace-aware word wrap and fixed-width hard wrap."""

from __future__ import annotations

from typing import Optional

from textbuf.buffer import Text, TextBuffer, apply_edit

_BREAKABLE = frozenset(" \t")


def word_wrap(text: Optional[Text], width: int) -> Text:
    """Break lines at ``width`` columns, preferring the last space or tab.

    The column counter restarts at every newline, existing or inserted. A
    line with no whitespace is broken right after the ``width``-th
    character. ``width <= 0`` leaves the text unchanged.
    """

    return apply_edit(text, lambda buffer: _word_wrap(buffer, width))


def _word_wrap(buffer: TextBuffer, width: int) -> TextBuffer:
    if width <= 0:
        return buffer
    column = 0
    blank_at = -1
    index = 0
    while index < len(buffer):
        char = buffer.char_at(index)
        column += 1
        if char == "\n":
            column = 0
            blank_at = -1
        elif char in _BREAKABLE:
            blank_at = index
        if column == width:
            if blank_at > -1:
                buffer.set_char_at(blank_at, "\n")
                column = 0
                blank_at = -1
            else:
                index += 1
                if index < len(buffer):
                    buffer.insert(index, "\n")
                    column = 0
        index += 1
    return buffer


def wrap(text: Optional[Text], width: int) -> Text:
    """Insert a newline after every ``width`` characters of a line.

    Whitespace gets no special treatment. ``width <= 0`` leaves the text
    unchanged.
    """

    return apply_edit(text, lambda buffer: _wrap(buffer, width))


def _wrap(buffer: TextBuffer, width: int) -> TextBuffer:
    if width <= 0:
        return buffer
    column = 0
    index = 0
    while index < len(buffer):
        column += 1
        if buffer.char_at(index) == "\n":
            column = 0
        if column == width:
            index += 1
            if index < len(buffer):
                buffer.insert(index, "\n")
                column = 0
        index += 1
    return buffer


__all__ = ["word_wrap", "wrap"]
