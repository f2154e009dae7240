"""Text operations grouped by capability."""

from .cipher import (
    rot13,
    rot13_char,
    rot13n5,
    rot13n5_char,
    rot_ascii,
    rot_ascii_char,
)
from .codec import hex_decode, hex_encode
from .convert import to_bool, to_int
from .layout import word_wrap, wrap
from .search import count, index_of, last_index_of
from .shape import (
    left,
    pad_center,
    pad_left,
    pad_right,
    replace,
    replicate,
    right,
    substring,
    trim,
)
from .tokenize import join, merge, split

__all__ = [
    "index_of",
    "last_index_of",
    "count",
    "trim",
    "left",
    "right",
    "substring",
    "pad_left",
    "pad_right",
    "pad_center",
    "replace",
    "replicate",
    "word_wrap",
    "wrap",
    "split",
    "join",
    "merge",
    "hex_encode",
    "hex_decode",
    "rot13",
    "rot13_char",
    "rot13n5",
    "rot13n5_char",
    "rot_ascii",
    "rot_ascii_char",
    "to_bool",
    "to_int",
]
