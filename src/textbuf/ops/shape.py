"""Trimming, slicing, padding, replacement and replication.

Every editing function accepts either a ``str`` or a :class:`TextBuffer`.
Buffers are edited in place and returned; strings produce a new string.
``None`` is treated as absent text and produces ``""``.
"""

from __future__ import annotations

from typing import Optional

from textbuf.buffer import (
    Text,
    TextBuffer,
    apply_edit,
    ensure_char,
    ensure_span,
    ensure_width,
    read_text,
)


def trim(text: Optional[Text]) -> Text:
    """Strip leading and trailing whitespace."""

    return apply_edit(text, _trim)


def _trim(buffer: TextBuffer) -> TextBuffer:
    source = buffer.to_text()
    stripped = source.lstrip()
    leading = len(source) - len(stripped)
    trailing = len(stripped) - len(stripped.rstrip())
    buffer.set_length(len(source) - trailing)
    return buffer.delete(0, leading)


def left(text: Optional[Text], length: int) -> str:
    source = read_text(text)
    if source is None:
        return ""
    end = ensure_span(len(source), 0, length)
    return source[:end]


def right(text: Optional[Text], length: int) -> str:
    source = read_text(text)
    if source is None:
        return ""
    ensure_span(len(source), 0, length)
    return source[len(source) - length :]


def substring(text: Optional[Text], start: int, length: Optional[int] = None) -> str:
    """Return ``length`` characters from ``start`` (or everything after it)."""

    source = read_text(text)
    if source is None:
        return ""
    end = ensure_span(len(source), start, length)
    return source[start:end]


def pad_left(text: Optional[Text], width: int, pad_char: str = " ") -> Text:
    """Right-align within ``width``, truncating from the right when too long."""

    return apply_edit(text, lambda buffer: _pad(buffer, width, pad_char, "left"))


def pad_right(text: Optional[Text], width: int, pad_char: str = " ") -> Text:
    """Left-align within ``width``, truncating from the right when too long."""

    return apply_edit(text, lambda buffer: _pad(buffer, width, pad_char, "right"))


def pad_center(text: Optional[Text], width: int, pad_char: str = " ") -> Text:
    """Center within ``width``.

    With an odd amount of padding the extra character goes on the right.
    Text longer than ``width`` is cut from the right.
    """

    return apply_edit(text, lambda buffer: _pad(buffer, width, pad_char, "center"))


def _pad(buffer: TextBuffer, width: int, pad_char: str, align: str) -> TextBuffer:
    ensure_width(width)
    ensure_char(pad_char, name="pad_char")
    if len(buffer) > width:
        return buffer.set_length(width)
    missing = width - len(buffer)
    if align == "left":
        return buffer.insert(0, pad_char * missing)
    if align == "right":
        return buffer.append(pad_char * missing)
    half = missing // 2
    return buffer.insert(0, pad_char * half).append(pad_char * (missing - half))


def replace(
    text: Optional[Text], target: Optional[str], replacement: str
) -> Text:
    """Replace every occurrence of ``target`` scanning left to right.

    Scanning resumes after each inserted replacement, so a replacement that
    contains ``target`` is never rescanned.
    """

    return apply_edit(text, lambda buffer: _replace(buffer, target, replacement))


def _replace(
    buffer: TextBuffer, target: Optional[str], replacement: str
) -> TextBuffer:
    if not target or target == replacement:
        return buffer
    source = buffer.to_text()
    pieces = []
    position = 0
    found = source.find(target)
    while found > -1:
        pieces.append(source[position:found])
        pieces.append(replacement)
        position = found + len(target)
        found = source.find(target, position)
    if not pieces:
        return buffer
    pieces.append(source[position:])
    return buffer.assign("".join(pieces))


def replicate(
    value: Optional[str], times: int, *, buffer: Optional[TextBuffer] = None
) -> Text:
    """Concatenate ``times`` copies of ``value``.

    When ``buffer`` is given the copies are appended to it and the buffer is
    returned instead of a new string.
    """

    copies = (value or "") * max(times, 0)
    if buffer is not None:
        return buffer.append(copies)
    return copies


__all__ = [
    "trim",
    "left",
    "right",
    "substring",
    "pad_left",
    "pad_right",
    "pad_center",
    "replace",
    "replicate",
]
