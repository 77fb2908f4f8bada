"""Builds frames from an ``EditorSession``."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from tty_editor.runtime import telemetry
from tty_editor.runtime.config import EditorConfig

from .frame import DrawKind, DrawOp, Frame

if TYPE_CHECKING:  # pragma: no cover
    from tty_editor.session import EditorSession

NO_NAME = "[No Name]"


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="replace")


class RenderEngine:
    """Recomputes scrolling and draws text rows, status bar and message bar.

    Nothing is cached between calls; the same session state always yields the
    same frame.
    """

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()

    def render(self, session: "EditorSession", *, now: Optional[float] = None) -> Frame:
        with telemetry.span(
            "render::frame",
            component="render",
            metadata={"rows": session.viewport.rows, "cols": session.viewport.cols},
        ):
            viewport = session.viewport
            viewport.scroll_to(session.cursor, session.document)

            frame = Frame()
            frame.emit(DrawKind.HIDE_CURSOR)
            frame.emit(DrawKind.HOME)

            for row in self.draw_rows(session):
                frame.rows.append(row)
                if row:
                    frame.emit(DrawKind.TEXT, row)
                frame.emit(DrawKind.CLEAR_LINE)
                frame.emit(DrawKind.NEWLINE)

            frame.status = self.status_bar(session)
            frame.emit(DrawKind.INVERT)
            frame.emit(DrawKind.TEXT, frame.status)
            frame.emit(DrawKind.RESET_STYLE)
            frame.emit(DrawKind.NEWLINE)

            timestamp = session.clock() if now is None else now
            frame.message = self.message_bar(session, timestamp)
            frame.emit(DrawKind.CLEAR_LINE)
            if frame.message:
                frame.emit(DrawKind.TEXT, frame.message)

            cursor = session.cursor
            frame.cursor = (
                cursor.cy - viewport.row_offset + 1,
                cursor.rx - viewport.col_offset + 1,
            )
            frame.ops.append(
                DrawOp(DrawKind.MOVE_CURSOR, row=frame.cursor[0], col=frame.cursor[1])
            )
            frame.emit(DrawKind.SHOW_CURSOR)
            return frame

    def draw_rows(self, session: "EditorSession") -> List[bytes]:
        viewport = session.viewport
        document = session.document
        cols = max(viewport.cols, 0)
        rows: List[bytes] = []
        for y in range(viewport.rows):
            file_row = y + viewport.row_offset
            line = document.get_line(file_row)
            if line is not None:
                start = viewport.col_offset
                rows.append(line.rendered[start : start + cols])
            elif document.line_count == 0 and y == viewport.rows // 3:
                rows.append(self._banner(cols))
            else:
                rows.append(b"~")
        return rows

    def _banner(self, cols: int) -> bytes:
        welcome = _encode(self.config.banner)[:cols]
        padding = (cols - len(welcome)) // 2
        out = bytearray()
        if padding:
            out += b"~"
            padding -= 1
        out += b" " * padding
        out += welcome
        return bytes(out)

    def status_bar(self, session: "EditorSession") -> bytes:
        cols = max(session.viewport.cols, 0)
        name = (session.filename or NO_NAME)[: self.config.filename_width]
        total = session.document.line_count
        modified = "(modified)" if session.dirty else ""
        left = _encode(f"{name} - {total} lines {modified}")[:cols]
        right = _encode(f"{session.cursor.cy + 1}/{total}")

        out = bytearray(left)
        while len(out) < cols:
            if cols - len(out) == len(right):
                out += right
                break
            out += b" "
        return bytes(out)

    def message_bar(self, session: "EditorSession", now: float) -> bytes:
        status = session.status
        if not status.visible(now, self.config.message_timeout):
            return b""
        return _encode(status.text)[: max(session.viewport.cols, 0)]


__all__ = ["RenderEngine", "NO_NAME"]
