"""Text mutations at the cursor."""

from __future__ import annotations

from tty_editor.keys import EditorKey
from tty_editor.modes.base_mode import ModeContext, ModeResult

from .motion import move_cursor


def insert_byte(context: ModeContext, byte: int) -> ModeResult:
    session = context.session
    cursor = session.cursor
    document = session.document
    if cursor.cy == document.line_count:
        document.append_line()
    document.insert_char(cursor.cy, cursor.cx, byte)
    cursor.cx += 1
    return ModeResult(consumed=True, status="insert")


def insert_newline(context: ModeContext, match) -> ModeResult:
    """Split the line at the cursor; at column 0 open an empty line above."""

    del match
    session = context.session
    cursor = session.cursor
    if cursor.cx == 0:
        session.document.insert_line(cursor.cy, b"")
    else:
        session.document.split_line(cursor.cy, cursor.cx)
    cursor.cy += 1
    cursor.cx = 0
    return ModeResult(consumed=True, status="insert")


def delete_backward(context: ModeContext, match) -> ModeResult:
    """Remove the byte before the cursor, joining lines at column 0."""

    del match
    session = context.session
    cursor = session.cursor
    document = session.document
    if cursor.cy == document.line_count:
        return ModeResult(consumed=True, status="noop")
    if cursor.cx == 0 and cursor.cy == 0:
        return ModeResult(consumed=True, status="noop")

    if cursor.cx > 0:
        document.delete_char(cursor.cy, cursor.cx - 1)
        cursor.cx -= 1
    else:
        previous = cursor.cy - 1
        joined_at = document.line_length(previous)
        current = document.get_line(cursor.cy)
        document.append_string(previous, bytes(current.raw) if current else b"")
        document.delete_line(cursor.cy)
        cursor.cy = previous
        cursor.cx = joined_at
    return ModeResult(consumed=True, status="delete")


def delete_forward(context: ModeContext, match) -> ModeResult:
    """Delete key: step right, then delete backwards."""

    move_cursor(context.session, EditorKey.ARROW_RIGHT)
    return delete_backward(context, match)


def noop(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "insert_byte",
    "insert_newline",
    "delete_backward",
    "delete_forward",
    "noop",
]
