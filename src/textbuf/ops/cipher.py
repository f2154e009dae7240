"""Per-character rotation ciphers: ROT13, ROT13N5 and ROTASCII.

The ``*_char`` functions map a single character. The text-level functions
apply the same mapping to every character of a ``str`` or a
:class:`TextBuffer` (in place).
"""

from __future__ import annotations

from typing import Optional

from textbuf.buffer import Text, apply_edit, ensure_char

ASCII_MODULUS = 256


def rot13_char(char: str) -> str:
    ensure_char(char)
    # swap halves of the alphabet instead of wrapping with a modulus
    if "A" <= char <= "M" or "a" <= char <= "m":
        return chr(ord(char) + 13)
    if "N" <= char <= "Z" or "n" <= char <= "z":
        return chr(ord(char) - 13)
    return char


def rot13n5_char(char: str) -> str:
    ensure_char(char)
    if "0" <= char <= "4":
        return chr(ord(char) + 5)
    if "5" <= char <= "9":
        return chr(ord(char) - 5)
    return rot13_char(char)


def rot_ascii_char(char: str, rotation: int) -> str:
    """Shift the code point by ``rotation`` modulo 256.

    Undo with ``-rotation``. Code points above 255 are folded into the
    0-255 range and cannot be recovered.
    """

    ensure_char(char)
    return chr((ord(char) + rotation) % ASCII_MODULUS)


def rot13(text: Optional[Text]) -> Text:
    return apply_edit(text, lambda buffer: buffer.map_chars(rot13_char))


def rot13n5(text: Optional[Text]) -> Text:
    return apply_edit(text, lambda buffer: buffer.map_chars(rot13n5_char))


def rot_ascii(text: Optional[Text], rotation: int) -> Text:
    return apply_edit(
        text,
        lambda buffer: buffer.map_chars(lambda char: rot_ascii_char(char, rotation)),
    )


__all__ = [
    "rot13_char",
    "rot13n5_char",
    "rot_ascii_char",
    "rot13",
    "rot13n5",
    "rot_ascii",
    "ASCII_MODULUS",
]
