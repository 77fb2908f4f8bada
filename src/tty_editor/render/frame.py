"""Draw operations for one screen refresh."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

CLEAR_SCREEN = b"\x1b[2J"
CURSOR_HOME = b"\x1b[H"


class DrawKind(str, Enum):
    HIDE_CURSOR = "hide_cursor"
    HOME = "home"
    TEXT = "text"
    CLEAR_LINE = "clear_line"
    NEWLINE = "newline"
    INVERT = "invert"
    RESET_STYLE = "reset_style"
    MOVE_CURSOR = "move_cursor"
    SHOW_CURSOR = "show_cursor"


_FIXED_SEQUENCES = {
    DrawKind.HIDE_CURSOR: b"\x1b[?25l",
    DrawKind.HOME: CURSOR_HOME,
    DrawKind.CLEAR_LINE: b"\x1b[K",
    DrawKind.NEWLINE: b"\r\n",
    DrawKind.INVERT: b"\x1b[7m",
    DrawKind.RESET_STYLE: b"\x1b[m",
    DrawKind.SHOW_CURSOR: b"\x1b[?25h",
}


@dataclass(frozen=True, slots=True)
class DrawOp:
    kind: DrawKind
    data: bytes = b""
    row: int = 0
    col: int = 0

    def to_bytes(self) -> bytes:
        if self.kind is DrawKind.TEXT:
            return self.data
        if self.kind is DrawKind.MOVE_CURSOR:
            return b"\x1b[%d;%dH" % (self.row, self.col)
        return _FIXED_SEQUENCES[self.kind]


@dataclass(slots=True)
class Frame:
    """Ordered draw ops plus the decoded pieces tests and hosts care about.

    ``cursor`` is the 1-based ``(row, col)`` screen position.
    """

    ops: List[DrawOp] = field(default_factory=list)
    rows: List[bytes] = field(default_factory=list)
    status: bytes = b""
    message: bytes = b""
    cursor: Tuple[int, int] = (1, 1)

    def emit(self, kind: DrawKind, data: bytes = b"") -> None:
        self.ops.append(DrawOp(kind, data))

    def to_bytes(self) -> bytes:
        return b"".join(op.to_bytes() for op in self.ops)


__all__ = ["DrawKind", "DrawOp", "Frame", "CLEAR_SCREEN", "CURSOR_HOME"]
