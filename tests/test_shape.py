from __future__ import annotations

import pytest

from textbuf import (
    TextBuffer,
    TextRangeError,
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


def test_trim_strips_only_the_ends() -> None:
    assert trim("  a b \t\n") == "a b"
    assert trim("   ") == ""
    assert trim(None) == ""


def test_trim_buffer_in_place() -> None:
    buffer = TextBuffer("\t x y  ")

    assert trim(buffer) is buffer
    assert buffer.to_text() == "x y"


def test_left_right_substring() -> None:
    assert left("hello", 2) == "he"
    assert right("hello", 2) == "lo"
    assert right("hello", 0) == ""
    assert substring("hello", 1) == "ello"
    assert substring("hello", 1, 3) == "ell"
    assert substring(TextBuffer("hello"), 5) == ""


def test_absent_text_ignores_lengths() -> None:
    assert left(None, 99) == ""
    assert right(None, -1) == ""
    assert substring(None, 7, 3) == ""


@pytest.mark.parametrize(
    "call",
    [
        lambda: left("abc", 4),
        lambda: left("abc", -1),
        lambda: right("abc", 4),
        lambda: substring("abc", 4),
        lambda: substring("abc", -1),
        lambda: substring("abc", 1, 3),
        lambda: substring("abc", 0, -1),
    ],
)
def test_strict_bounds_raise(call) -> None:
    with pytest.raises(IndexError):
        call()


def test_padding_with_custom_char() -> None:
    assert pad_left("ab", 5, "*") == "***ab"
    assert pad_right("ab", 5, "*") == "ab***"
    assert pad_center("ab", 5, "*") == "*ab**"
    assert pad_center("ab", 6, "*") == "**ab**"


def test_padding_defaults_to_space() -> None:
    assert pad_left("x", 3) == "  x"
    assert pad_right("x", 3) == "x  "
    assert pad_center("x", 3) == " x "


def test_padding_truncates_from_the_right() -> None:
    assert pad_left("abcdef", 3) == "abc"
    assert pad_right("abcdef", 3) == "abc"
    assert pad_center("abcdef", 3) == "abc"
    assert pad_left("abc", 0) == ""


def test_padding_exact_width_is_unchanged() -> None:
    assert pad_center("abc", 3, "*") == "abc"


def test_padding_rejects_bad_arguments() -> None:
    with pytest.raises(TextRangeError):
        pad_left("abc", -1)
    with pytest.raises(ValueError):
        pad_right("abc", 5, "**")


def test_padding_buffer_in_place() -> None:
    buffer = TextBuffer("ab")

    assert pad_center(buffer, 5, "-") is buffer
    assert buffer.to_text() == "-ab--"
    assert pad_left(None, 4) == ""


def test_replace_resumes_after_the_inserted_text() -> None:
    assert replace("aXbXc", "X", "XY") == "aXYbXYc"
    assert replace("aaa", "a", "aa") == "aaaaaa"
    assert replace("abcabc", "bc", "") == "aa"


def test_replace_noops() -> None:
    assert replace("abc", "", "z") == "abc"
    assert replace("abc", "b", "b") == "abc"
    assert replace("abc", None, "z") == "abc"
    assert replace(None, "a", "b") == ""


def test_replace_single_character_in_buffer() -> None:
    buffer = TextBuffer("a.b.c")

    assert replace(buffer, ".", "/") is buffer
    assert buffer.to_text() == "a/b/c"


def test_replicate() -> None:
    assert replicate("ab", 3) == "ababab"
    assert replicate("-", 4) == "----"
    assert replicate("ab", 0) == ""
    assert replicate("ab", -2) == ""
    assert replicate(None, 3) == ""


def test_replicate_into_buffer() -> None:
    buffer = TextBuffer(">")

    assert replicate("=", 3, buffer=buffer) is buffer
    assert buffer.to_text() == ">==="


def test_replicate_absent_value_into_buffer() -> None:
    buffer = TextBuffer(">")

    assert replicate(None, 3, buffer=buffer) is buffer
    assert buffer.to_text() == ">"
