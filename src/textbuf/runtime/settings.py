"""Environment-driven settings shared by telemetry and the command line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "TEXTBUF_"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved ``TEXTBUF_*`` environment values."""

    logger_name: str = "textbuf"
    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    log_buffered: bool = False
    log_buffer_size: int = 2048
    console: bool = True
    color: bool = True
    wrap_width: int = 72
    pad_char: str = " "

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = _PrefixedEnv(os.environ if environ is None else environ)
        defaults = cls()
        pad_char = env.get("PAD_CHAR", defaults.pad_char)
        return cls(
            logger_name=env.get("LOGGER", defaults.logger_name),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
            log_file=env.get("LOG_FILE", defaults.log_file),
            log_json=env.flag("LOG_JSON", defaults.log_json),
            log_buffered=env.flag("LOG_BUFFERED", defaults.log_buffered),
            log_buffer_size=env.integer("LOG_BUFFER_SIZE", defaults.log_buffer_size),
            console=not env.flag("DISABLE_CONSOLE", not defaults.console),
            color=not env.flag("NO_COLOR", not defaults.color),
            wrap_width=env.integer("WRAP_WIDTH", defaults.wrap_width),
            pad_char=pad_char if len(pad_char) == 1 else defaults.pad_char,
        )


class _PrefixedEnv:
    def __init__(self, environ: Mapping[str, str]) -> None:
        self._environ = environ

    def get(self, name: str, default: str) -> str:
        return self._environ.get(f"{ENV_PREFIX}{name}", default)

    def flag(self, name: str, default: bool) -> bool:
        raw = self._environ.get(f"{ENV_PREFIX}{name}")
        if raw is None:
            return default
        return raw.lower() in {"1", "true", "yes", "on"}

    def integer(self, name: str, default: int) -> int:
        raw = self._environ.get(f"{ENV_PREFIX}{name}")
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            return default


__all__ = ["ENV_PREFIX", "Settings"]
