"""Copy-in/copy-out boundary between immutable ``str`` values and buffers."""

from __future__ import annotations

from typing import Callable, Optional, Union

from .buffer import TextBuffer

Text = Union[str, TextBuffer]
BufferEdit = Callable[[TextBuffer], TextBuffer]


def read_text(text: Optional[Text]) -> Optional[str]:
    """Return a plain string view of ``text`` without mutating it."""

    if text is None:
        return None
    if isinstance(text, TextBuffer):
        return text.to_text()
    return text


def apply_edit(text: Optional[Text], edit: BufferEdit) -> Text:
    """Run ``edit`` against ``text``.

    Buffers are edited in place and returned as the same instance. Strings are
    copied into a scratch buffer and the edited copy is returned as a string.
    Absent text yields ``""``.
    """

    if text is None:
        return ""
    if isinstance(text, TextBuffer):
        return edit(text)
    return edit(TextBuffer(text)).to_text()
