from __future__ import annotations

from typing import List

import pytest

from textbuf.adapters.textual import (
    RotterController,
    RotterHooks,
    apply_rot13,
    apply_rot13n5,
)


class FakeTextArea:
    def __init__(self, text: str = "") -> None:
        self.text = text
        self.writes: List[str] = []

    def read(self) -> str:
        return self.text

    def write(self, text: str) -> None:
        self.writes.append(text)
        self.text = text


def make_controller(area: FakeTextArea, statuses: List[str]) -> RotterController:
    hooks = RotterHooks(
        read_text=area.read,
        write_text=area.write,
        update_status=lambda status: statuses.append(status),
    )
    return RotterController(hooks)


def test_apply_functions_are_pure() -> None:
    assert apply_rot13("Secret 42") == "Frperg 42"
    assert apply_rot13n5("Secret 42") == "Frperg 97"
    assert apply_rot13("") == ""


def test_rot13_button_rotates_display_text() -> None:
    area = FakeTextArea("Hello")
    statuses: List[str] = []
    controller = make_controller(area, statuses)

    assert controller.rot13() == "Uryyb"
    assert area.text == "Uryyb"
    assert statuses == ["rot13"]

    controller.rot13()
    assert area.text == "Hello"


def test_rot13n5_button_round_trips() -> None:
    area = FakeTextArea("pin 1234")
    controller = make_controller(area, [])

    controller.rot13n5()
    assert area.text == "cva 6789"
    controller.rot13n5()
    assert area.text == "pin 1234"


def test_clear_button_empties_text() -> None:
    area = FakeTextArea("something")
    statuses: List[str] = []
    controller = make_controller(area, statuses)

    controller.clear()

    assert area.text == ""
    assert statuses == ["clear"]


def test_controller_emits_log_lines() -> None:
    area = FakeTextArea("abc")
    logs: List[str] = []
    hooks = RotterHooks(
        read_text=area.read,
        write_text=area.write,
        log=lambda line: logs.append(line),
    )
    controller = RotterController(hooks)

    controller.dispatch("rot13")

    assert logs == ["rot13 -> chars=3"]


def test_unknown_action_is_rejected() -> None:
    controller = make_controller(FakeTextArea(), [])

    with pytest.raises(KeyError):
        controller.dispatch("rot47")
