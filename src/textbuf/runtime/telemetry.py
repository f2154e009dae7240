"""Telemetry services built directly on telelog.

The text operations themselves never log. Outer surfaces (the command line
and the Rotter controller) report through this module:

``configure(...)`` -- adopt an explicit config, a named preset, or the env defaults
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block, optionally tracked as a component
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .settings import Settings

tl = cast(Any, telelog)

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_ACTIVE_SETTINGS: Optional[Settings] = None


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def build_config(settings: Settings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.log_level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.color)
    if settings.log_json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.log_buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.log_buffer_size)
    config.with_profiling(True)
    return config


def build_preset_config(preset: str, settings: Optional[Settings] = None) -> Any:
    settings = settings or Settings.from_env()
    key = preset.lower()
    config = tl.Config()

    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(settings.log_file or "textbuf.log")
        config.with_buffering(True)
    elif key in {"performance", "performance_analysis"}:
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_buffering(True)
        config.with_json_format(True)
        config.with_file_output(settings.log_file or "textbuf-performance.log")
    else:
        raise ValueError(f"Unknown preset '{preset}'.")

    config.with_profiling(True)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    ``config`` and ``preset`` are mutually exclusive. With neither, the
    configuration is derived from ``settings`` (``TEXTBUF_*`` variables by
    default).
    """

    global _ACTIVE_CONFIG, _ACTIVE_SETTINGS
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    _ACTIVE_SETTINGS = settings or Settings.from_env()
    if preset:
        config = build_preset_config(preset, _ACTIVE_SETTINGS)
    elif config is None:
        config = build_config(_ACTIVE_SETTINGS)

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def _ensure_config() -> Any:
    if _ACTIVE_CONFIG is None:
        configure()
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    config = _ensure_config()
    logger_name = name or (_ACTIVE_SETTINGS or Settings()).logger_name
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, config)
    return _LOGGER_CACHE[logger_name]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_data = _level_method(logger, level)
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Handle yielded by ``span``; reports failures with the span metadata."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and optionally track it as a component.

    ``component=True`` reuses ``name`` as the component id; a string names it
    explicitly. ``metadata`` is attached as logger context for the duration
    of the block. Exceptions are reported with ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=cast(Optional[str], component_name),
        metadata=dict(context),
    )
    added: list[str] = []

    try:
        for key, value in context.items():
            log.add_context(key, value)
            added.append(key)
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in added:
            log.remove_context(key)


__all__ = [
    "SpanHandle",
    "build_config",
    "build_preset_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
