"""Command line exposing one subcommand per text operation."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional, Sequence, TextIO, Union

from textbuf import ops
from textbuf.buffer import TextRangeError
from textbuf.runtime import Settings, telemetry

Output = Union[str, int, List[str], None]
Handler = Callable[[argparse.Namespace, str], Output]


def _with_text(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "text", nargs="?", help="Input text (read from stdin when omitted)"
    )
    return parser


def _handle_index_of(args: argparse.Namespace, text: str) -> Output:
    return ops.index_of(text, args.target, args.start)


def _handle_last_index_of(args: argparse.Namespace, text: str) -> Output:
    return ops.last_index_of(text, args.target, args.start)


def _handle_count(args: argparse.Namespace, text: str) -> Output:
    return ops.count(text, args.target)


def _handle_trim(args: argparse.Namespace, text: str) -> Output:
    return str(ops.trim(text))


def _handle_left(args: argparse.Namespace, text: str) -> Output:
    return ops.left(text, args.length)


def _handle_right(args: argparse.Namespace, text: str) -> Output:
    return ops.right(text, args.length)


def _handle_substring(args: argparse.Namespace, text: str) -> Output:
    return ops.substring(text, args.start, args.length)


def _handle_pad(align: str) -> Handler:
    pad = {"left": ops.pad_left, "right": ops.pad_right, "center": ops.pad_center}[
        align
    ]

    def handler(args: argparse.Namespace, text: str) -> Output:
        return str(pad(text, args.width, args.char))

    return handler


def _handle_replace(args: argparse.Namespace, text: str) -> Output:
    return str(ops.replace(text, args.target, args.replacement))


def _handle_replicate(args: argparse.Namespace, text: str) -> Output:
    return str(ops.replicate(text, args.times))


def _handle_word_wrap(args: argparse.Namespace, text: str) -> Output:
    return str(ops.word_wrap(text, args.width))


def _handle_wrap(args: argparse.Namespace, text: str) -> Output:
    return str(ops.wrap(text, args.width))


def _handle_split(args: argparse.Namespace, text: str) -> Output:
    return ops.split(text, args.delimiter)


def _handle_join(args: argparse.Namespace, text: str) -> Output:
    parts = args.parts if args.parts else text.splitlines()
    return ops.join(parts, args.delimiter)


def _handle_merge(args: argparse.Namespace, text: str) -> Output:
    del text
    return ops.merge(args.keys, args.values, args.pair, args.item)


def _handle_hex_encode(args: argparse.Namespace, text: str) -> Output:
    return str(ops.hex_encode(text))


def _handle_hex_decode(args: argparse.Namespace, text: str) -> Output:
    return str(ops.hex_decode(text))


def _handle_rot13(args: argparse.Namespace, text: str) -> Output:
    return str(ops.rot13(text))


def _handle_rot13n5(args: argparse.Namespace, text: str) -> Output:
    return str(ops.rot13n5(text))


def _handle_rot_ascii(args: argparse.Namespace, text: str) -> Output:
    return str(ops.rot_ascii(text, args.rotation))


def _handle_rotter(args: argparse.Namespace, text: str) -> Output:
    del text
    from textbuf.adapters.textual.app import run

    run(args.initial_text)
    return None


# Subcommands that take no input text of their own.
_NO_INPUT = {"join", "merge", "rotter"}


def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        prog="textbuf", description="String and text-buffer utilities."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, handler: Handler, help_text: str) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.set_defaults(handler=handler)
        return sub if name in _NO_INPUT else _with_text(sub)

    sub = add("indexof", _handle_index_of, "first position of a target")
    sub.add_argument("--target", required=True)
    sub.add_argument("--start", type=int, default=0)

    sub = add("lastindexof", _handle_last_index_of, "last position of a target")
    sub.add_argument("--target", required=True)
    sub.add_argument("--start", type=int, default=None)

    sub = add("count", _handle_count, "count occurrences of a target")
    sub.add_argument("--target", required=True)

    add("trim", _handle_trim, "strip surrounding whitespace")

    for name, handler in (("left", _handle_left), ("right", _handle_right)):
        sub = add(name, handler, f"{name}most characters")
        sub.add_argument("--length", type=int, required=True)

    sub = add("substring", _handle_substring, "slice by start and length")
    sub.add_argument("--start", type=int, required=True)
    sub.add_argument("--length", type=int, default=None)

    for align in ("left", "right", "center"):
        sub = add(f"pad{align}", _handle_pad(align), f"pad or truncate ({align})")
        sub.add_argument("--width", type=int, required=True)
        sub.add_argument("--char", default=settings.pad_char)

    sub = add("replace", _handle_replace, "replace every occurrence")
    sub.add_argument("--target", required=True)
    sub.add_argument("--replacement", required=True)

    sub = add("replicate", _handle_replicate, "repeat the text")
    sub.add_argument("--times", type=int, required=True)

    sub = add("wordwrap", _handle_word_wrap, "wrap lines at whitespace")
    sub.add_argument("--width", type=int, default=settings.wrap_width)

    sub = add("wrap", _handle_wrap, "wrap lines at an exact width")
    sub.add_argument("--width", type=int, default=settings.wrap_width)

    sub = add("split", _handle_split, "split on a delimiter, one part per line")
    sub.add_argument("--delimiter", default=",")

    sub = add("join", _handle_join, "join parts (or stdin lines) with a delimiter")
    sub.add_argument("parts", nargs="*")
    sub.add_argument("--delimiter", default=",")

    sub = add("merge", _handle_merge, "pair keys with values")
    sub.add_argument("--key", dest="keys", action="append", default=[])
    sub.add_argument("--value", dest="values", action="append", default=[])
    sub.add_argument("--pair", default="=")
    sub.add_argument("--item", default=",")

    add("hexencode", _handle_hex_encode, "encode as colon-separated hex")
    add("hexdecode", _handle_hex_decode, "decode colon-separated hex")
    add("rot13", _handle_rot13, "rotate letters by 13")
    add("rot13n5", _handle_rot13n5, "rotate letters by 13 and digits by 5")

    sub = add("rotascii", _handle_rot_ascii, "rotate code points modulo 256")
    sub.add_argument("--rotation", type=int, required=True)

    sub = add("rotter", _handle_rotter, "open the Textual rotation scratch pad")
    sub.add_argument("--text", dest="initial_text", default="")

    return parser


def _read_input(args: argparse.Namespace, stdin: TextIO) -> str:
    if args.command in {"merge", "rotter"}:
        return ""
    text = getattr(args, "text", None)
    if text is not None:
        return text
    if getattr(args, "parts", None):
        return ""
    data = stdin.read()
    return data[:-1] if data.endswith("\n") else data


def _write_output(result: Output, stdout: TextIO) -> None:
    if result is None:
        return
    if isinstance(result, list):
        for part in result:
            stdout.write(f"{part}\n")
        return
    stdout.write(f"{result}\n")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    settings = Settings.from_env()
    telemetry.configure(settings=settings)
    args = build_parser(settings).parse_args(argv)

    try:
        with telemetry.span(
            f"cli::{args.command}",
            component="cli",
            metadata={"command": args.command},
        ):
            result = args.handler(args, _read_input(args, stdin))
    except (TextRangeError, ValueError) as exc:
        stderr.write(f"textbuf {args.command}: error: {exc}\n")
        return 2

    _write_output(result, stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
