"""Editor configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "TTY_EDITOR_"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables shared by the buffer, renderer and controller."""

    tab_stop: int = 8
    quit_times: int = 1
    message_timeout: float = 5.0
    status_width: int = 80
    filename_width: int = 20
    version: str = "0.1"
    help_message: str = "HELP: Ctrl-S = save | Ctrl-Q = quit"

    def __post_init__(self) -> None:
        if self.tab_stop < 1:
            raise ValueError("tab_stop must be at least 1")
        if self.quit_times < 0:
            raise ValueError("quit_times cannot be negative")
        if self.message_timeout < 0:
            raise ValueError("message_timeout cannot be negative")

    @property
    def banner(self) -> str:
        return f"Text editor -- version {self.version}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            tab_stop=_env_int(env, "TAB_STOP", defaults.tab_stop),
            quit_times=_env_int(env, "QUIT_TIMES", defaults.quit_times),
            message_timeout=_env_float(
                env, "MESSAGE_TIMEOUT", defaults.message_timeout
            ),
        )

    def with_overrides(self, **changes: object) -> "EditorConfig":
        """Return a copy with every non-``None`` override applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


__all__ = ["EditorConfig", "ENV_PREFIX"]
