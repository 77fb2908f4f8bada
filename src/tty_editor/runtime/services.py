"""Protocols for the collaborators the editor core talks to.

The core never touches file descriptors directly; hosts hand it objects that
satisfy these protocols (see ``tty_editor.adapters.terminal`` for the POSIX
implementations and the tests for in-memory fakes).
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple


class TerminalError(RuntimeError):
    """Unrecoverable failure of the terminal or another host service."""

    def __init__(self, source: str, reason: str | None = None) -> None:
        message = source if reason is None else f"{source}: {reason}"
        super().__init__(message)
        self.source = source
        self.reason = reason


class ByteSource(Protocol):
    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        """Return the next byte, or ``None`` if nothing arrived in ``timeout``.

        Any other failure is raised as ``OSError``.
        """
        ...


class OutputSink(Protocol):
    def write(self, data: bytes) -> None:
        ...


class SizeProvider(Protocol):
    def get_size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)`` or raise ``TerminalError``."""
        ...


class FileStore(Protocol):
    def read_lines(self, path: str) -> List[bytes]:
        """Return the file's records with line terminators stripped."""
        ...

    def write_all(self, path: str, data: bytes) -> int:
        """Replace the file's content with ``data``; return bytes written."""
        ...


__all__ = [
    "ByteSource",
    "OutputSink",
    "SizeProvider",
    "FileStore",
    "TerminalError",
]
