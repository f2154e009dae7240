"""Colon-separated hexadecimal code point encoding."""

from __future__ import annotations

import re
import sys
from typing import Optional

from textbuf.buffer import Text, TextBuffer, apply_edit

SEPARATOR = ":"
PLACEHOLDER = "?"

# Unsigned hex digits only: signed ("+41", "-1") and "0x" tokens decode to "?".
_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


def hex_encode(text: Optional[Text]) -> Text:
    """Encode each character as its lowercase hex code point.

    ``hex_encode("ABC") == "41:42:43"``; no zero padding is applied.
    """

    return apply_edit(text, _hex_encode)


def _hex_encode(buffer: TextBuffer) -> TextBuffer:
    tokens = [format(ord(char), "x") for char in buffer]
    return buffer.assign(SEPARATOR.join(tokens))


def hex_decode(text: Optional[Text]) -> Text:
    """Decode ``hex_encode`` output.

    Empty tokens are skipped. Tokens that are not hex digits, or that do not
    name a valid code point, decode to ``?``.
    """

    return apply_edit(text, _hex_decode)


def _hex_decode(buffer: TextBuffer) -> TextBuffer:
    tokens = [token for token in buffer.to_text().split(SEPARATOR) if token]
    return buffer.assign("".join(_decode_token(token) for token in tokens))


def _decode_token(token: str) -> str:
    if not _HEX_TOKEN.fullmatch(token):
        return PLACEHOLDER
    code_point = int(token, 16)
    if code_point > sys.maxunicode:
        return PLACEHOLDER
    return chr(code_point)


__all__ = ["hex_encode", "hex_decode", "SEPARATOR", "PLACEHOLDER"]
