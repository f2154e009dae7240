"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Optional


class TextRangeError(IndexError):
    """Raised when a caller passes a start/length outside the text."""

    def __init__(
        self,
        message: str,
        *,
        start: Optional[int] = None,
        length: Optional[int] = None,
        size: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.start = start
        self.length = length
        self.size = size


def ensure_span(size: int, start: int, length: Optional[int] = None) -> int:
    """Validate ``[start, start + length)`` against ``size`` and return the end.

    With ``length`` omitted the span runs to the end of the text.
    """

    if start < 0 or start > size:
        raise TextRangeError(
            f"start {start} outside text of length {size}", start=start, size=size
        )
    if length is None:
        return size
    if length < 0 or start + length > size:
        raise TextRangeError(
            f"length {length} from {start} outside text of length {size}",
            start=start,
            length=length,
            size=size,
        )
    return start + length


def ensure_width(width: int) -> int:
    if width < 0:
        raise TextRangeError(f"width {width} is negative", length=width)
    return width


def ensure_char(value: str, *, name: str = "character") -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value
