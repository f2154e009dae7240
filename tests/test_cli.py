from __future__ import annotations

import io
from typing import List, Tuple

import pytest

from textbuf.cli import main


@pytest.fixture(autouse=True)
def quiet_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXTBUF_DISABLE_CONSOLE", "1")


def run(argv: List[str], stdin: str = "") -> Tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin), stdout=out, stderr=err)
    return code, out.getvalue(), err.getvalue()


def output(argv: List[str], stdin: str = "") -> str:
    code, out, err = run(argv, stdin)
    assert code == 0, err
    return out


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["rot13", "Hello"], "Uryyb\n"),
        (["rot13n5", "a1"], "n6\n"),
        (["rotascii", "--rotation", "-1", "B"], "A\n"),
        (["hexencode", "ABC"], "41:42:43\n"),
        (["hexdecode", "41:zz"], "A?\n"),
        (["padcenter", "--width", "5", "--char", "*", "ab"], "*ab**\n"),
        (["padleft", "--width", "3", "abcdef"], "abc\n"),
        (["replace", "--target", "X", "--replacement", "XY", "aXbXc"], "aXYbXYc\n"),
        (["replicate", "--times", "3", "ab"], "ababab\n"),
        (["count", "--target", "aa", "aaaa"], "3\n"),
        (["indexof", "--target", "b", "abc"], "1\n"),
        (["lastindexof", "--target", "a", "abca"], "3\n"),
        (["substring", "--start", "1", "--length", "2", "hello"], "el\n"),
        (["wordwrap", "--width", "5", "aaaa bbbb"], "aaaa\nbbbb\n"),
        (["wrap", "--width", "2", "abcd"], "ab\ncd\n"),
        (["split", "A,B,"], "A\nB\n\n"),
        (["split", "NOVALUE"], ""),
        (["join", "--delimiter", "-", "a", "b"], "a-b\n"),
        (
            ["merge", "--key", "A", "--value", "1", "--key", "B", "--value", "2"],
            "A=1,B=2\n",
        ),
    ],
)
def test_subcommands(argv: List[str], expected: str) -> None:
    assert output(argv) == expected


def test_text_is_read_from_stdin() -> None:
    assert output(["trim"], stdin="  padded  \n") == "padded\n"
    assert output(["join"], stdin="x\ny\n") == "x,y\n"


def test_wrap_width_defaults_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXTBUF_WRAP_WIDTH", "3")

    assert output(["wrap", "abcdef"]) == "abc\ndef\n"


def test_range_errors_exit_with_status_two() -> None:
    code, out, err = run(["left", "--length", "9", "abc"])

    assert code == 2
    assert out == ""
    assert "left" in err


def test_value_errors_exit_with_status_two() -> None:
    code, _out, err = run(["merge", "--key", "A"])

    assert code == 2
    assert "equal length" in err
