"""Per-document editing session shared by modes, actions and the renderer."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from tty_editor.buffer import Cursor, Document
from tty_editor.render.viewport import Viewport
from tty_editor.runtime.config import EditorConfig

Clock = Callable[[], float]


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    set_at: float = 0.0

    def visible(self, now: float, timeout: float) -> bool:
        return bool(self.text) and now - self.set_at < timeout


class EditorSession:
    """Document, cursor, viewport and the bookkeeping around saving/quitting."""

    def __init__(
        self,
        document: Optional[Document] = None,
        *,
        config: Optional[EditorConfig] = None,
        filename: Optional[str] = None,
        rows: int = 24,
        cols: int = 80,
        clock: Clock = time.time,
    ) -> None:
        self.config = config or EditorConfig()
        self.document = (
            document if document is not None else Document(tab_stop=self.config.tab_stop)
        )
        self.cursor = Cursor()
        self.viewport = Viewport(rows=rows, cols=cols)
        self.filename = filename
        self.status = StatusMessage()
        self.quit_times = self.config.quit_times
        self.clock = clock

    @property
    def dirty(self) -> bool:
        return self.document.dirty > 0

    @property
    def current_line_length(self) -> int:
        return self.document.line_length(self.cursor.cy)

    def set_status(self, message: str) -> None:
        self.status = StatusMessage(
            text=message[: self.config.status_width], set_at=self.clock()
        )

    def reset_quit_guard(self) -> None:
        self.quit_times = self.config.quit_times


__all__ = ["EditorSession", "StatusMessage"]
