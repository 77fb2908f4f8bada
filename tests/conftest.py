from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

import pytest

from tty_editor.adapters.terminal.controller import create_default_manager
from tty_editor.buffer import Document
from tty_editor.keys import KeyEvent
from tty_editor.keys.models import EditorKey
from tty_editor.modes.mode_manager import ModeManager
from tty_editor.runtime.config import EditorConfig
from tty_editor.runtime.services import TerminalError
from tty_editor.session import EditorSession


class MemoryFiles:
    """In-memory ``FileStore``; ``fail_with`` makes every write raise."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None) -> None:
        self.contents: Dict[str, bytes] = dict(initial or {})
        self.fail_with: Optional[OSError] = None
        self.writes: List[str] = []

    def read_lines(self, path: str) -> List[bytes]:
        if path not in self.contents:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.contents[path].splitlines()

    def write_all(self, path: str, data: bytes) -> int:
        if self.fail_with is not None:
            raise self.fail_with
        self.contents[path] = bytes(data)
        self.writes.append(path)
        return len(data)


class ScriptedTerminal:
    """Terminal double fed from a byte script; raises once the script runs dry."""

    def __init__(self, script: bytes = b"", *, size: tuple[int, int] = (24, 80)) -> None:
        self.pending = list(script)
        self.size = size
        self.output = bytearray()
        self.idle_reads = 0

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        if self.pending:
            return self.pending.pop(0)
        self.idle_reads += 1
        if self.idle_reads > 3:
            raise TerminalError("read", "script exhausted")
        return None

    def write(self, data: bytes) -> None:
        self.output += data

    def get_size(self) -> tuple[int, int]:
        return self.size


def keys_for(text: str) -> List[KeyEvent]:
    return [KeyEvent(ord(char)) for char in text]


def special(key: EditorKey) -> KeyEvent:
    return KeyEvent.special(key)


@pytest.fixture
def memory_files() -> MemoryFiles:
    return MemoryFiles()


@pytest.fixture
def make_manager(
    memory_files: MemoryFiles,
) -> Callable[..., ModeManager]:
    def factory(
        lines: Iterable[bytes] = (),
        *,
        filename: Optional[str] = None,
        rows: int = 24,
        cols: int = 80,
        config: Optional[EditorConfig] = None,
        now: float = 100.0,
    ) -> ModeManager:
        cfg = config or EditorConfig()
        session = EditorSession(
            Document(lines, tab_stop=cfg.tab_stop),
            config=cfg,
            filename=filename,
            rows=rows,
            cols=cols,
            clock=lambda: now,
        )
        return create_default_manager(session, memory_files)

    return factory
