"""Ordered collection of lines with every buffer mutation."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Sequence

from tty_editor.runtime import telemetry

from .line import Line

LINE_TERMINATOR = b"\n"


class Document:
    """List-of-lines storage.

    Out-of-range indices are silently ignored by every mutator; ``dirty``
    counts mutations since the last load or save.
    """

    def __init__(
        self, lines: Iterable[bytes] = (), *, tab_stop: int = 8
    ) -> None:
        self.tab_stop = tab_stop
        self._lines: List[Line] = [Line(raw, tab_stop) for raw in lines]
        self.dirty = 0

    @classmethod
    def from_lines(cls, lines: Iterable[bytes], *, tab_stop: int = 8) -> "Document":
        return cls(lines, tab_stop=tab_stop)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def snapshot(self) -> Sequence[bytes]:
        return tuple(bytes(line.raw) for line in self._lines)

    def line_length(self, index: int) -> int:
        line = self.get_line(index)
        return len(line) if line is not None else 0

    def cx_to_rx(self, index: int, cx: int) -> int:
        line = self.get_line(index)
        return line.cx_to_rx(cx) if line is not None else 0

    def insert_line(self, at: int, content: bytes = b"") -> None:
        if at < 0 or at > len(self._lines):
            return
        with self._mutation("insert_line", at):
            self._lines.insert(at, Line(content, self.tab_stop))

    def append_line(self, content: bytes = b"") -> None:
        self.insert_line(len(self._lines), content)

    def delete_line(self, at: int) -> None:
        if at < 0 or at >= len(self._lines):
            return
        with self._mutation("delete_line", at):
            del self._lines[at]

    def insert_char(self, row: int, at: int, byte: int) -> None:
        line = self.get_line(row)
        if line is None:
            return
        with self._mutation("insert_char", row):
            line.insert(at, byte)

    def delete_char(self, row: int, at: int) -> None:
        line = self.get_line(row)
        if line is None or at < 0 or at >= len(line):
            return
        with self._mutation("delete_char", row):
            line.delete(at)

    def append_string(self, row: int, data: bytes) -> None:
        line = self.get_line(row)
        if line is None:
            return
        with self._mutation("append_string", row):
            line.append(data)

    def split_line(self, row: int, at: int) -> None:
        """Move everything from ``at`` onwards into a new line below ``row``."""

        line = self.get_line(row)
        if line is None:
            return
        with self._mutation("split_line", row):
            tail = line.truncate(at)
            self._lines.insert(row + 1, Line(tail, self.tab_stop))

    def serialize(self) -> bytes:
        return b"".join(bytes(line.raw) + LINE_TERMINATOR for line in self._lines)

    def mark_clean(self) -> None:
        self.dirty = 0

    @contextmanager
    def _mutation(self, label: str, row: int) -> Iterator[None]:
        with telemetry.span(
            f"buffer::{label}",
            component="buffer",
            metadata={"row": row, "lines": len(self._lines)},
        ):
            yield
        self.dirty += 1


__all__ = ["Document", "LINE_TERMINATOR"]
