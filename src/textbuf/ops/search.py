"""Forward/backward search and occurrence counting."""

from __future__ import annotations

from typing import Optional

from textbuf.buffer import Text, read_text


def index_of(text: Optional[Text], target: Optional[str], start: int = 0) -> int:
    """Return the first position of ``target`` at or after ``start``, or -1.

    ``target`` may be a single character or a substring. A negative ``start``
    searches from the beginning.
    """

    source = read_text(text)
    if source is None or not target:
        return -1
    return source.find(target, max(start, 0))


def last_index_of(
    text: Optional[Text], target: Optional[str], start: Optional[int] = None
) -> int:
    """Return the last position of ``target`` starting at or before ``start``.

    ``start`` defaults to the end of the text. Returns -1 when nothing matches
    or ``start`` is negative.
    """

    source = read_text(text)
    if source is None or not target:
        return -1
    if start is None:
        start = len(source)
    if start < 0:
        return -1
    end = min(start + len(target), len(source))
    return source.rfind(target, 0, end)


def count(text: Optional[Text], target: Optional[str]) -> int:
    """Count occurrences of ``target``, stepping one character past each match.

    Overlapping occurrences are counted: ``count("aaaa", "aa") == 3``.
    """

    source = read_text(text)
    total = 0
    index = index_of(source, target)
    while index > -1:
        total += 1
        index = index_of(source, target, index + 1)
    return total


__all__ = ["index_of", "last_index_of", "count"]
