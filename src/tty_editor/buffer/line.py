"""A single document line and its derived rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

TAB = 0x09
SPACE = 0x20


def expand_tabs(raw: bytes, tab_stop: int) -> bytes:
    """Replace every TAB with spaces up to the next multiple of ``tab_stop``."""

    out = bytearray()
    for byte in raw:
        if byte == TAB:
            out.append(SPACE)
            while len(out) % tab_stop:
                out.append(SPACE)
        else:
            out.append(byte)
    return bytes(out)


@dataclass(slots=True)
class Line:
    """Raw bytes of one line plus the rendering the screen shows.

    ``rendered`` is rebuilt by every mutating method; callers must not edit
    it directly.
    """

    raw: bytearray = field(default_factory=bytearray)
    tab_stop: int = 8
    rendered: bytes = field(init=False, default=b"")

    def __post_init__(self) -> None:
        self.raw = bytearray(self.raw)
        self.update()

    def __len__(self) -> int:
        return len(self.raw)

    def update(self) -> None:
        self.rendered = expand_tabs(self.raw, self.tab_stop)

    def cx_to_rx(self, cx: int) -> int:
        rx = 0
        for byte in self.raw[: max(cx, 0)]:
            if byte == TAB:
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def insert(self, at: int, byte: int) -> None:
        if at < 0 or at > len(self.raw):
            at = len(self.raw)
        self.raw.insert(at, byte)
        self.update()

    def delete(self, at: int) -> bool:
        if at < 0 or at >= len(self.raw):
            return False
        del self.raw[at]
        self.update()
        return True

    def append(self, data: bytes) -> None:
        self.raw.extend(data)
        self.update()

    def truncate(self, at: int) -> bytes:
        """Cut the line at ``at`` and return the removed tail."""

        at = max(0, min(at, len(self.raw)))
        tail = bytes(self.raw[at:])
        del self.raw[at:]
        self.update()
        return tail


__all__ = ["Line", "expand_tabs", "TAB"]
