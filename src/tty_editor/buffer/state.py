"""Cursor position in raw and rendered coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """``cx``/``cy`` index raw bytes; ``rx`` is derived once per frame."""

    cx: int = 0
    cy: int = 0
    rx: int = 0

    def move_to(self, cx: int, cy: int) -> None:
        self.cx = cx
        self.cy = cy

    @property
    def position(self) -> tuple[int, int]:
        return (self.cx, self.cy)
