"""Executable Textual app: a text area with Rot13, Rot13n5 and Clear buttons."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Button, Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textbuf.adapters.textual.app"
    ) from exc

from .controller import RotterController, RotterHooks


class RotterApp(App[None]):
    """Scratch pad that rotates its own contents."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-view {
		height: 1fr;
		border: round $accent;
	}

	#button-bar {
		height: auto;
		padding: 0 1;
	}

	#button-bar Button {
		margin-right: 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, initial_text: str = "") -> None:
        super().__init__()
        self._initial_text = initial_text
        self.controller: RotterController | None = None
        self._text_widget: TextArea | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._text_widget = TextArea(self._initial_text, id="text-view")
        yield self._text_widget
        with Horizontal(id="button-bar"):
            yield Button("Rot13", id="rot13")
            yield Button("Rot13n5", id="rot13n5")
            yield Button("Clear", id="clear")
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = RotterHooks(
            read_text=self._read_text,
            write_text=self._write_text,
            update_status=self._update_status,
        )
        self.controller = RotterController(hooks)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if self.controller and event.button.id:
            self.controller.dispatch(event.button.id)
            event.stop()

    def _read_text(self) -> str:
        return self._text_widget.text if self._text_widget else ""

    def _write_text(self, text: str) -> None:
        if self._text_widget:
            self._text_widget.load_text(text)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Rotter Textual app.")
    parser.add_argument(
        "--text",
        default="",
        help="Initial contents of the text area",
    )
    return parser.parse_args(argv)


def run(initial_text: str = "") -> None:
    RotterApp(initial_text=initial_text).run()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    run(args.text)


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
