"""String and text-buffer manipulation toolkit.

Every operation accepts a plain ``str`` (returning a new value) or a
:class:`TextBuffer` (edited in place and returned for chaining). ``None``
stands for absent text.
"""

from textbuf.buffer import TextBuffer, TextRangeError
from textbuf.ops import (
    count,
    hex_decode,
    hex_encode,
    index_of,
    join,
    last_index_of,
    left,
    merge,
    pad_center,
    pad_left,
    pad_right,
    replace,
    replicate,
    right,
    rot13,
    rot13_char,
    rot13n5,
    rot13n5_char,
    rot_ascii,
    rot_ascii_char,
    split,
    substring,
    to_bool,
    to_int,
    trim,
    word_wrap,
    wrap,
)

__all__ = [
    "__version__",
    "TextBuffer",
    "TextRangeError",
    # search
    "index_of",
    "last_index_of",
    "count",
    # shape
    "trim",
    "left",
    "right",
    "substring",
    "pad_left",
    "pad_right",
    "pad_center",
    "replace",
    "replicate",
    # layout
    "word_wrap",
    "wrap",
    # tokenize
    "split",
    "join",
    "merge",
    # codec
    "hex_encode",
    "hex_decode",
    # cipher
    "rot13",
    "rot13_char",
    "rot13n5",
    "rot13n5_char",
    "rot_ascii",
    "rot_ascii_char",
    # convert
    "to_bool",
    "to_int",
]

__version__ = "0.1.0"
