"""UI-agnostic controller behind the Rotter text area and its three buttons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from textbuf.ops import rot13, rot13n5
from textbuf.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def apply_rot13(display_text: str) -> str:
    return str(rot13(display_text))


def apply_rot13n5(display_text: str) -> str:
    return str(rot13n5(display_text))


@dataclass(slots=True)
class RotterHooks:
    """Callbacks the controller uses to read and update the host widgets."""

    read_text: Callable[[], str]
    write_text: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class RotterController:
    """Maps button presses onto text transformations of the display text."""

    ACTIONS: Dict[str, Callable[[str], str]] = {
        "rot13": apply_rot13,
        "rot13n5": apply_rot13n5,
        "clear": lambda _text: "",
    }

    def __init__(self, hooks: RotterHooks) -> None:
        self.hooks = hooks

    def rot13(self) -> str:
        return self.dispatch("rot13")

    def rot13n5(self) -> str:
        return self.dispatch("rot13n5")

    def clear(self) -> str:
        return self.dispatch("clear")

    def dispatch(self, action: str) -> str:
        try:
            transform = self.ACTIONS[action]
        except KeyError as exc:
            raise KeyError(f"Unknown rotter action '{action}'") from exc
        before = self.hooks.read_text()
        after = transform(before)
        self.hooks.write_text(after)
        self.hooks.update_status(action)
        self.hooks.log(f"{action} -> chars={len(after)}")
        telemetry.record_event(
            f"rotter.{action}",
            level="debug",
            data={"chars_before": len(before), "chars_after": len(after)},
        )
        return after


__all__ = ["RotterController", "RotterHooks", "apply_rot13", "apply_rot13n5"]
