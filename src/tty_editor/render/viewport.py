"""Visible window into the document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from tty_editor.buffer import Cursor, Document


@dataclass(slots=True)
class Viewport:
    rows: int
    cols: int
    row_offset: int = 0
    col_offset: int = 0

    def scroll_to(self, cursor: "Cursor", document: "Document") -> None:
        """Recompute ``cursor.rx`` and move the offsets so the cursor is visible."""

        cursor.rx = 0
        if cursor.cy < document.line_count:
            cursor.rx = document.cx_to_rx(cursor.cy, cursor.cx)

        rows = max(self.rows, 1)
        cols = max(self.cols, 1)
        if cursor.cy < self.row_offset:
            self.row_offset = cursor.cy
        if cursor.cy >= self.row_offset + rows:
            self.row_offset = cursor.cy - rows + 1
        if cursor.rx < self.col_offset:
            self.col_offset = cursor.rx
        if cursor.rx >= self.col_offset + cols:
            self.col_offset = cursor.rx - cols + 1

    def contains(self, rx: int, cy: int) -> bool:
        rows = max(self.rows, 1)
        cols = max(self.cols, 1)
        return (
            self.row_offset <= cy < self.row_offset + rows
            and self.col_offset <= rx < self.col_offset + cols
        )


__all__ = ["Viewport"]
