from __future__ import annotations

from tty_editor.buffer import Document
from tty_editor.runtime.config import EditorConfig
from tty_editor.session import EditorSession


def test_empty_document_is_kept() -> None:
    doc = Document(tab_stop=4)

    session = EditorSession(doc)
    session.document.append_line(b"\tx")

    assert session.document is doc
    assert doc.tab_stop == 4
    assert doc.snapshot() == (b"\tx",)


def test_default_document_uses_configured_tab_stop() -> None:
    session = EditorSession(config=EditorConfig(tab_stop=2))
    assert session.document.line_count == 0
    assert session.document.tab_stop == 2


def test_status_is_truncated_and_timestamped() -> None:
    session = EditorSession(clock=lambda: 42.0)
    session.set_status("x" * 100)
    assert session.status.text == "x" * 80
    assert session.status.visible(46.9, 5.0)
    assert not session.status.visible(47.0, 5.0)
