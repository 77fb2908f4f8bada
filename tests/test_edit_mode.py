from __future__ import annotations

import random
from typing import Callable, List

from conftest import keys_for, special

from tty_editor.keys import BACKSPACE, ENTER, ESC, KeyEvent, ctrl_key
from tty_editor.keys.models import EditorKey
from tty_editor.modes.mode_manager import ModeManager

Factory = Callable[..., ModeManager]


def press(manager: ModeManager, *keys: KeyEvent) -> None:
    for key in keys:
        manager.handle_key(key)


def test_typing_into_empty_document_creates_line(make_manager: Factory) -> None:
    manager = make_manager()
    press(manager, *keys_for("hi"))
    session = manager.context.session

    assert session.document.snapshot() == (b"hi",)
    assert session.cursor.position == (2, 0)
    assert session.dirty


def test_enter_splits_line_at_cursor(make_manager: Factory) -> None:
    manager = make_manager([b"aaaa", b"bbbb", b"cccc"])
    session = manager.context.session
    session.cursor.move_to(2, 1)

    manager.handle_key(KeyEvent(ENTER))

    assert session.document.snapshot() == (b"aaaa", b"bb", b"bb", b"cccc")
    assert session.document.line_count == 4
    assert session.cursor.position == (0, 2)


def test_enter_at_line_start_opens_line_above(make_manager: Factory) -> None:
    manager = make_manager([b"abc"])
    manager.handle_key(KeyEvent(ENTER))
    session = manager.context.session
    assert session.document.snapshot() == (b"", b"abc")
    assert session.cursor.position == (0, 1)


def test_backspace_at_line_start_joins_lines(make_manager: Factory) -> None:
    manager = make_manager([b"one", b"two", b"three"])
    session = manager.context.session
    session.cursor.move_to(0, 2)

    manager.handle_key(KeyEvent(BACKSPACE))

    assert session.document.snapshot() == (b"one", b"twothree")
    assert session.cursor.position == (3, 1)


def test_backspace_at_document_start_is_noop(make_manager: Factory) -> None:
    manager = make_manager([b"abc"])
    result = manager.handle_key(KeyEvent(BACKSPACE))
    session = manager.context.session
    assert result.status == "noop"
    assert session.document.snapshot() == (b"abc",)
    assert session.document.dirty == 0


def test_ctrl_h_deletes_like_backspace(make_manager: Factory) -> None:
    manager = make_manager([b"abc"])
    session = manager.context.session
    session.cursor.move_to(3, 0)
    manager.handle_key(KeyEvent(ctrl_key("h")))
    assert session.document.snapshot() == (b"ab",)


def test_delete_removes_character_under_cursor(make_manager: Factory) -> None:
    manager = make_manager([b"abc", b"def"])
    session = manager.context.session
    session.cursor.move_to(1, 0)

    manager.handle_key(special(EditorKey.DELETE))
    assert session.document.snapshot() == (b"ac", b"def")
    assert session.cursor.position == (1, 0)

    session.cursor.move_to(2, 0)
    manager.handle_key(special(EditorKey.DELETE))
    assert session.document.snapshot() == (b"acdef",)


def test_delete_at_document_end_leaves_text_alone(make_manager: Factory) -> None:
    manager = make_manager([b"ab"])
    session = manager.context.session
    session.cursor.move_to(2, 0)

    manager.handle_key(special(EditorKey.DELETE))

    assert session.document.snapshot() == (b"ab",)
    assert session.document.dirty == 0


def test_arrows_wrap_across_lines(make_manager: Factory) -> None:
    manager = make_manager([b"ab", b"c"])
    session = manager.context.session
    session.cursor.move_to(2, 0)

    manager.handle_key(special(EditorKey.ARROW_RIGHT))
    assert session.cursor.position == (0, 1)

    manager.handle_key(special(EditorKey.ARROW_LEFT))
    assert session.cursor.position == (2, 0)

    manager.handle_key(special(EditorKey.ARROW_LEFT))
    manager.handle_key(special(EditorKey.ARROW_LEFT))
    manager.handle_key(special(EditorKey.ARROW_LEFT))
    assert session.cursor.position == (0, 0)


def test_vertical_moves_clamp_column(make_manager: Factory) -> None:
    manager = make_manager([b"long line", b"ab"])
    session = manager.context.session
    session.cursor.move_to(8, 0)

    manager.handle_key(special(EditorKey.ARROW_DOWN))
    assert session.cursor.position == (2, 1)

    manager.handle_key(special(EditorKey.ARROW_DOWN))
    assert session.cursor.position == (0, 2)

    manager.handle_key(special(EditorKey.ARROW_DOWN))
    assert session.cursor.position == (0, 2)


def test_home_and_end(make_manager: Factory) -> None:
    manager = make_manager([b"hello"])
    session = manager.context.session
    session.cursor.move_to(2, 0)

    manager.handle_key(special(EditorKey.END))
    assert session.cursor.cx == 5
    manager.handle_key(special(EditorKey.HOME))
    assert session.cursor.cx == 0


def test_paging_moves_a_screen(make_manager: Factory) -> None:
    manager = make_manager([b"x"] * 100, rows=10)
    session = manager.context.session

    manager.handle_key(special(EditorKey.PAGE_DOWN))
    assert session.cursor.cy == 19

    manager.handle_key(special(EditorKey.PAGE_UP))
    assert session.cursor.cy == 0


def test_page_down_stops_past_last_line(make_manager: Factory) -> None:
    manager = make_manager([b"x"] * 5, rows=10)
    manager.handle_key(special(EditorKey.PAGE_DOWN))
    assert manager.context.session.cursor.cy == 5


def test_refresh_and_escape_do_nothing(make_manager: Factory) -> None:
    manager = make_manager([b"abc"])
    for key in (KeyEvent(ctrl_key("l")), KeyEvent(ESC)):
        result = manager.handle_key(key)
        assert result.status == "noop"
    assert manager.context.session.document.dirty == 0


def test_unbound_control_byte_is_inserted(make_manager: Factory) -> None:
    manager = make_manager()
    manager.handle_key(KeyEvent(ctrl_key("a")))
    assert manager.context.session.document.snapshot() == (b"\x01",)


def test_quit_clean_document_exits_immediately(make_manager: Factory) -> None:
    manager = make_manager([b"abc"])
    assert manager.handle_key(KeyEvent(ctrl_key("q"))).quit


def test_ctrl_c_also_quits(make_manager: Factory) -> None:
    manager = make_manager()
    assert manager.handle_key(KeyEvent(ctrl_key("c"))).quit


def test_quit_with_unsaved_changes_needs_confirmation(make_manager: Factory) -> None:
    manager = make_manager()
    session = manager.context.session
    press(manager, *keys_for("x"))

    first = manager.handle_key(KeyEvent(ctrl_key("q")))
    assert not first.quit
    assert first.status == "quit_refused"
    assert session.quit_times == 0
    assert session.status.text == (
        "WARNING!!! File has unsaved changes. Press Ctrl-Q 1 more times to quit."
    )

    assert manager.handle_key(KeyEvent(ctrl_key("q"))).quit


def test_other_keys_reset_quit_confirmation(make_manager: Factory) -> None:
    manager = make_manager()
    session = manager.context.session
    press(manager, *keys_for("x"))

    manager.handle_key(KeyEvent(ctrl_key("q")))
    manager.handle_key(special(EditorKey.ARROW_LEFT))
    assert session.quit_times == 1

    assert not manager.handle_key(KeyEvent(ctrl_key("q"))).quit


class ListModel:
    """Straightforward list-of-bytes editor the real one must agree with."""

    def __init__(self, lines: List[bytes]) -> None:
        self.lines = list(lines)
        self.cx = 0
        self.cy = 0

    def length(self, row: int) -> int:
        return len(self.lines[row]) if row < len(self.lines) else 0

    def insert(self, byte: int) -> None:
        if self.cy == len(self.lines):
            self.lines.append(b"")
        line = self.lines[self.cy]
        self.lines[self.cy] = line[: self.cx] + bytes([byte]) + line[self.cx :]
        self.cx += 1

    def enter(self) -> None:
        line = self.lines[self.cy] if self.cy < len(self.lines) else b""
        if self.cx == 0:
            self.lines.insert(self.cy, b"")
        else:
            self.lines[self.cy : self.cy + 1] = [line[: self.cx], line[self.cx :]]
        self.cy += 1
        self.cx = 0

    def backspace(self) -> None:
        if self.cy == len(self.lines) or (self.cx == 0 and self.cy == 0):
            return
        line = self.lines[self.cy]
        if self.cx > 0:
            self.lines[self.cy] = line[: self.cx - 1] + line[self.cx :]
            self.cx -= 1
        else:
            self.cx = len(self.lines[self.cy - 1])
            self.lines[self.cy - 1] += line
            del self.lines[self.cy]
            self.cy -= 1

    def move(self, key: EditorKey) -> None:
        if key is EditorKey.ARROW_UP and self.cy > 0:
            self.cy -= 1
        elif key is EditorKey.ARROW_DOWN and self.cy < len(self.lines):
            self.cy += 1
        elif key is EditorKey.ARROW_LEFT:
            if self.cx > 0:
                self.cx -= 1
            elif self.cy > 0:
                self.cy -= 1
                self.cx = self.length(self.cy)
        elif key is EditorKey.ARROW_RIGHT and self.cy < len(self.lines):
            if self.cx < self.length(self.cy):
                self.cx += 1
            else:
                self.cy += 1
                self.cx = 0
        self.cx = min(self.cx, self.length(self.cy))


def test_random_edits_match_list_model(make_manager: Factory) -> None:
    rng = random.Random(7)
    start = [b"alpha", b"\tbeta", b"", b"gamma delta"]
    manager = make_manager(start)
    session = manager.context.session
    model = ListModel(start)
    arrows = [
        EditorKey.ARROW_UP,
        EditorKey.ARROW_DOWN,
        EditorKey.ARROW_LEFT,
        EditorKey.ARROW_RIGHT,
    ]

    for _ in range(400):
        roll = rng.random()
        if roll < 0.4:
            byte = rng.choice(b"abc \t")
            manager.handle_key(KeyEvent(byte))
            model.insert(byte)
        elif roll < 0.5:
            manager.handle_key(KeyEvent(ENTER))
            model.enter()
        elif roll < 0.7:
            manager.handle_key(KeyEvent(BACKSPACE))
            model.backspace()
        else:
            key = rng.choice(arrows)
            manager.handle_key(special(key))
            model.move(key)

        assert list(session.document.snapshot()) == model.lines
        assert session.cursor.position == (model.cx, model.cy)
        assert 0 <= session.cursor.cy <= session.document.line_count
        assert 0 <= session.cursor.cx <= session.current_line_length
