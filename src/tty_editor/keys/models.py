"""Key event types produced by the decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

ESC = 0x1B
ENTER = 0x0D
BACKSPACE = 0x7F


def ctrl_key(key: Union[str, int]) -> int:
    """Byte a terminal sends for Ctrl + ``key`` (bits 5-7 cleared)."""

    code = ord(key) if isinstance(key, str) else key
    return code & 0x1F


class EditorKey(IntEnum):
    """Keys that arrive as escape sequences.

    Values sit above the byte range so they never collide with literal bytes.
    """

    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    DELETE = 1004
    HOME = 1005
    END = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """One decoded key: either a literal byte or an ``EditorKey``."""

    code: int

    def __post_init__(self) -> None:
        if isinstance(self.code, EditorKey):
            return
        if not 0 <= self.code <= 0xFF:
            raise ValueError(f"byte out of range: {self.code}")

    @classmethod
    def special(cls, key: EditorKey) -> "KeyEvent":
        return cls(code=key)

    @property
    def is_byte(self) -> bool:
        return not isinstance(self.code, EditorKey)

    @property
    def is_control(self) -> bool:
        return self.is_byte and (self.code < 0x20 or self.code == BACKSPACE)

    @property
    def is_printable(self) -> bool:
        """True for bytes that are neither control codes nor above ASCII."""

        return self.is_byte and 0x20 <= self.code < BACKSPACE


__all__ = ["EditorKey", "KeyEvent", "ctrl_key", "ESC", "ENTER", "BACKSPACE"]
