"""Mutable character buffer used as the shared core of every text operation."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from .validation import TextRangeError, ensure_char, ensure_span


class TextBuffer:
    """Ordered, resizable sequence of characters.

    Mutating methods return ``self`` so edits can be chained::

        TextBuffer("abc").insert(0, ">").append("<").to_text()  # ">abc<"
    """

    __slots__ = ("_chars",)

    def __init__(self, text: str = "") -> None:
        self._chars: List[str] = list(text)

    @classmethod
    def from_text(cls, text: Optional[str]) -> "TextBuffer":
        return cls(text or "")

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"TextBuffer({self.to_text()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self._chars == other._chars
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def to_text(self) -> str:
        return "".join(self._chars)

    def char_at(self, index: int) -> str:
        self._check_index(index)
        return self._chars[index]

    def set_char_at(self, index: int, char: str) -> "TextBuffer":
        self._check_index(index)
        self._chars[index] = ensure_char(char)
        return self

    def append(self, text: str) -> "TextBuffer":
        self._chars.extend(text)
        return self

    def insert(self, index: int, text: str) -> "TextBuffer":
        ensure_span(len(self._chars), index)
        self._chars[index:index] = list(text)
        return self

    def delete(self, start: int, end: int) -> "TextBuffer":
        """Remove ``[start, end)``; ``end`` past the last character is clamped."""

        ensure_span(len(self._chars), start)
        if end < start:
            raise TextRangeError(
                f"end {end} before start {start}", start=start, size=len(self)
            )
        del self._chars[start:end]
        return self

    def delete_char_at(self, index: int) -> "TextBuffer":
        self._check_index(index)
        del self._chars[index]
        return self

    def set_length(self, length: int) -> "TextBuffer":
        """Truncate to ``length`` characters. Growing the buffer is not allowed."""

        ensure_span(len(self._chars), 0, length)
        del self._chars[length:]
        return self

    def assign(self, text: str) -> "TextBuffer":
        self._chars[:] = list(text)
        return self

    def map_chars(self, transform: Callable[[str], str]) -> "TextBuffer":
        self._chars[:] = [transform(char) for char in self._chars]
        return self

    def substring(self, start: int, end: Optional[int] = None) -> str:
        size = len(self._chars)
        stop = size if end is None else end
        ensure_span(size, start, stop - start)
        return "".join(self._chars[start:stop])

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._chars):
            raise TextRangeError(
                f"index {index} outside buffer of length {len(self._chars)}",
                start=index,
                size=len(self._chars),
            )
