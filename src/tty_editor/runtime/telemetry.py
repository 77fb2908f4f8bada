"""Structured logging for the editor, backed by telelog.

The editor owns the screen while it runs, so nothing reaches the console
unless ``TTY_EDITOR_LOG_CONSOLE`` is set. Point ``TTY_EDITOR_LOG_FILE`` at a
file to keep a log of a session.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ROOT_LOGGER = "tty_editor"

# preset -> (minimum level, log file used when TTY_EDITOR_LOG_FILE is unset)
PRESETS: Dict[str, Tuple[str, str]] = {
    "development": ("DEBUG", "tty_editor-debug.log"),
    "production": ("INFO", "tty_editor.log"),
    "performance": ("DEBUG", "tty_editor-performance.log"),
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _setting(name: str) -> Optional[str]:
    return os.environ.get(f"TTY_EDITOR_{name}")


def _enabled(name: str) -> bool:
    return (_setting(name) or "").lower() in _TRUTHY


def _text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return value if isinstance(value, str) else str(value)


def _pairs(data: Mapping[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def build_config(preset: Optional[str] = None) -> Any:
    """Build a ``tl.Config`` from a named preset or the environment."""

    config = tl.Config()
    log_file = _setting("LOG_FILE")

    if preset is not None:
        name = preset.lower()
        if name not in PRESETS:
            raise ValueError(f"Unknown preset '{preset}'.")
        level, default_file = PRESETS[name]
        config.with_min_level(level)
        config.with_console_output(False)
        config.with_file_output(log_file or default_file)
        if name != "development":
            config.with_buffering(True)
        if name == "performance":
            config.with_json_format(True)
    else:
        config.with_min_level((_setting("LOG_LEVEL") or "INFO").upper())
        console = _enabled("LOG_CONSOLE")
        config.with_console_output(console)
        if console:
            config.with_colored_output(not _enabled("NO_COLOR"))
        if _enabled("LOG_JSON"):
            config.with_json_format(True)
        if log_file:
            config.with_file_output(log_file)

    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active configuration; cached loggers are rebuilt lazily."""

    global _config
    if config is not None and preset is not None:
        raise ValueError("Provide either `config` or `preset`, not both.")
    _config = config if config is not None else build_config(preset)
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _config
    if _config is None:
        _config = build_config()
    key = name or ROOT_LOGGER
    logger = _loggers.get(key)
    if logger is None:
        logger = _loggers[key] = tl.Logger.with_config(key, _config)
    return logger


def _log(logger: Any, level: str, message: str, data: Mapping[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(_pairs(data))}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    _log(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        data: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            data["component"] = self.component
        _log(self.logger, "error", "span::fail", data)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Mapping[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block as ``name``.

    ``component=True`` also tracks the block as a component of the same name;
    a string names the component explicitly. ``metadata`` is attached to the
    logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}

    for key, value in context.items():
        log.add_context(key, value)
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            handle = SpanHandle(log, name, component_name, dict(context))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
