"""Lenient conversions from text to scalar values."""

from __future__ import annotations

import re
from typing import Optional, Union

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MISSING = object()


def to_bool(text: Optional[str]) -> bool:
    """``True`` only for ``"true"`` in any letter case."""

    return text is not None and text.lower() == "true"


def to_int(text: Optional[str], default: Union[int, object] = _MISSING) -> int:
    """Parse a signed decimal integer.

    Without ``default`` a malformed value raises ``ValueError``; with it the
    default is returned instead.
    """

    if text is not None and _INTEGER.fullmatch(text):
        return int(text)
    if default is _MISSING:
        raise ValueError(f"not an integer: {text!r}")
    return default  # type: ignore[return-value]


__all__ = ["to_bool", "to_int"]
