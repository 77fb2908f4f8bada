"""Cursor movement shared by arrow, paging and delete actions."""

from __future__ import annotations

from tty_editor.keys import EditorKey
from tty_editor.modes.base_mode import ModeContext, ModeResult
from tty_editor.session import EditorSession


def move_cursor(session: EditorSession, key: EditorKey) -> None:
    """Move one cell, wrapping at line ends, then clamp ``cx`` to the line."""

    cursor = session.cursor
    document = session.document
    line = document.get_line(cursor.cy)

    if key is EditorKey.ARROW_UP:
        if cursor.cy != 0:
            cursor.cy -= 1
    elif key is EditorKey.ARROW_DOWN:
        if cursor.cy < document.line_count:
            cursor.cy += 1
    elif key is EditorKey.ARROW_LEFT:
        if cursor.cx != 0:
            cursor.cx -= 1
        elif cursor.cy > 0:
            cursor.cy -= 1
            cursor.cx = document.line_length(cursor.cy)
    elif key is EditorKey.ARROW_RIGHT:
        if line is not None and cursor.cx < len(line):
            cursor.cx += 1
        elif line is not None and cursor.cx == len(line):
            cursor.cy += 1
            cursor.cx = 0

    cursor.cx = min(cursor.cx, document.line_length(cursor.cy))


def _moved(context: ModeContext, key: EditorKey) -> ModeResult:
    move_cursor(context.session, key)
    return ModeResult(consumed=True, status="move")


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    return _moved(context, EditorKey.ARROW_LEFT)


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    return _moved(context, EditorKey.ARROW_RIGHT)


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    return _moved(context, EditorKey.ARROW_UP)


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    return _moved(context, EditorKey.ARROW_DOWN)


def line_start(context: ModeContext, match) -> ModeResult:
    del match
    context.session.cursor.cx = 0
    return ModeResult(consumed=True, status="move")


def line_end(context: ModeContext, match) -> ModeResult:
    del match
    session = context.session
    if session.cursor.cy < session.document.line_count:
        session.cursor.cx = session.current_line_length
    return ModeResult(consumed=True, status="move")


def page_up(context: ModeContext, match) -> ModeResult:
    del match
    session = context.session
    session.cursor.cy = session.viewport.row_offset
    for _ in range(session.viewport.rows):
        move_cursor(session, EditorKey.ARROW_UP)
    return ModeResult(consumed=True, status="move")


def page_down(context: ModeContext, match) -> ModeResult:
    del match
    session = context.session
    viewport = session.viewport
    session.cursor.cy = min(
        viewport.row_offset + viewport.rows - 1, session.document.line_count
    )
    for _ in range(viewport.rows):
        move_cursor(session, EditorKey.ARROW_DOWN)
    return ModeResult(consumed=True, status="move")


__all__ = [
    "move_cursor",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "line_start",
    "line_end",
    "page_up",
    "page_down",
]
