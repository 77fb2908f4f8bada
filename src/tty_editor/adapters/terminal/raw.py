"""Raw-mode terminal implementing the byte source, sink and size services."""

from __future__ import annotations

import errno
import os
import re
import select
import sys
import termios
from typing import List, Optional, Tuple

from tty_editor.render.frame import CLEAR_SCREEN, CURSOR_HOME
from tty_editor.runtime import telemetry
from tty_editor.runtime.services import TerminalError

_CURSOR_REPORT_RE = re.compile(rb"^\x1b\[(\d+);(\d+)$")
_QUERY_CURSOR = b"\x1b[6n"
_CURSOR_FAR_CORNER = b"\x1b[999C\x1b[999B"


class RawTerminal:
    """Byte-at-a-time terminal I/O without echo.

    ``enable_raw_mode`` mirrors the classic ``cfmakeraw`` subset: no echo, no
    canonical mode, no signals, no output post-processing, and a 100 ms read
    timeout (``VMIN=0``, ``VTIME=1``).
    """

    def __init__(
        self,
        *,
        stdin_fd: Optional[int] = None,
        stdout_fd: Optional[int] = None,
    ) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self._original: Optional[List] = None

    def __enter__(self) -> "RawTerminal":
        self.enable_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.disable_raw_mode()
        return False

    @property
    def is_raw(self) -> bool:
        return self._original is not None

    def enable_raw_mode(self) -> None:
        try:
            original = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise TerminalError("tcgetattr", str(exc)) from exc

        raw = list(original)
        raw[6] = list(original[6])
        raw[0] &= ~(
            termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1

        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalError("tcsetattr", str(exc)) from exc
        self._original = original
        telemetry.record_event("terminal.raw_mode", level="debug", data={"on": True})

    def disable_raw_mode(self) -> None:
        if self._original is None:
            return
        original, self._original = self._original, None
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, original)
        except termios.error as exc:
            raise TerminalError("tcsetattr", str(exc)) from exc
        telemetry.record_event("terminal.raw_mode", level="debug", data={"on": False})

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        try:
            ready, _, _ = select.select([self.stdin_fd], [], [], timeout)
            if not ready:
                return None
            data = os.read(self.stdin_fd, 1)
        except InterruptedError:
            return None
        except OSError as exc:
            if exc.errno == errno.EAGAIN:
                return None
            raise
        if not data:
            return None
        return data[0]

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def get_size(self) -> Tuple[int, int]:
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = None
        if size is not None and size.columns:
            return size.lines, size.columns
        try:
            self.write(_CURSOR_FAR_CORNER)
            return self.cursor_position()
        except OSError as exc:
            raise TerminalError("get_size", str(exc)) from exc

    def cursor_position(self) -> Tuple[int, int]:
        """Ask the terminal where the cursor is (``ESC [ 6 n``)."""

        self.write(_QUERY_CURSOR)
        reply = bytearray()
        while len(reply) < 31:
            byte = self.read_byte(0.1)
            if byte is None or byte == ord("R"):
                break
            reply.append(byte)

        match = _CURSOR_REPORT_RE.match(bytes(reply))
        if match is None:
            raise TerminalError("get_size", "unreadable cursor position report")
        return int(match.group(1)), int(match.group(2))


__all__ = ["RawTerminal"]
