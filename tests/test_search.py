from __future__ import annotations

import pytest

from textbuf import TextBuffer, count, index_of, last_index_of


@pytest.mark.parametrize("text", ["abcabc", TextBuffer("abcabc")])
def test_index_of_forward_from_start(text) -> None:
    assert index_of(text, "b") == 1
    assert index_of(text, "bc", 2) == 4
    assert index_of(text, "c", 6) == -1
    assert index_of(text, "x") == -1


@pytest.mark.parametrize("text", ["abcabc", TextBuffer("abcabc")])
def test_last_index_of_backward_from_start(text) -> None:
    assert last_index_of(text, "b") == 4
    assert last_index_of(text, "bc", 3) == 1
    assert last_index_of(text, "bc", 4) == 4
    assert last_index_of(text, "a", 0) == 0
    assert last_index_of(text, "a", 100) == 3


def test_negative_starts() -> None:
    assert index_of("abc", "a", -5) == 0
    assert last_index_of("abc", "a", -1) == -1


def test_absent_or_empty_inputs_return_minus_one() -> None:
    assert index_of(None, "a") == -1
    assert index_of("abc", None) == -1
    assert index_of("abc", "") == -1
    assert last_index_of(None, "a") == -1
    assert last_index_of(TextBuffer("abc"), "") == -1


def test_count_steps_one_past_each_match() -> None:
    assert count("ababab", "ab") == 3
    assert count("aaaa", "aa") == 3
    assert count(TextBuffer("aaaa"), "a") == 4


def test_count_absent_or_empty() -> None:
    assert count(None, "a") == 0
    assert count("abc", "") == 0
    assert count("abc", "z") == 0


def test_search_leaves_buffer_untouched() -> None:
    buffer = TextBuffer("needle")

    index_of(buffer, "e")
    count(buffer, "e")

    assert buffer.to_text() == "needle"
