"""Split delimited text into parts and join parts back together."""

from __future__ import annotations

from typing import List, Optional, Sequence

from textbuf.buffer import Text, read_text


def split(text: Optional[Text], delimiter: Optional[str]) -> List[str]:
    """Split ``text`` on a literal, non-empty ``delimiter``.

    Text that never contains the delimiter yields an empty list rather than a
    single element holding the whole text::

        split("A,B,", ",")   # ["A", "B", ""]
        split("NOVALUE", ",")  # []
    """

    source = read_text(text)
    if source is None or not delimiter:
        return []
    if delimiter not in source:
        return []
    parts: List[str] = []
    start = 0
    found = source.find(delimiter)
    while found > -1:
        parts.append(source[start:found])
        start = found + len(delimiter)
        found = source.find(delimiter, start)
    # implicit delimiter after the last part
    parts.append(source[start:])
    return parts


def join(parts: Sequence[str], delimiter: Optional[str]) -> str:
    return (delimiter or "").join(parts)


def merge(
    keys: Sequence[str],
    values: Sequence[str],
    pair_delimiter: str,
    item_delimiter: str,
) -> str:
    """Pair up ``keys`` and ``values`` as ``k<pair>v`` items joined by ``item``.

    ``merge(["A", "B"], ["1", "2"], "=", ",") == "A=1,B=2"``
    """

    if len(keys) != len(values):
        raise ValueError(
            f"merge needs sequences of equal length, got {len(keys)} and {len(values)}"
        )
    return item_delimiter.join(
        f"{key}{pair_delimiter}{value}" for key, value in zip(keys, values)
    )


__all__ = ["split", "join", "merge"]
