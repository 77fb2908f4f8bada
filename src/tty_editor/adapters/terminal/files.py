"""Local filesystem implementation of ``FileStore``."""

from __future__ import annotations

import os
from typing import List

from tty_editor.runtime import telemetry


class LocalFileStore:
    def read_lines(self, path: str) -> List[bytes]:
        with open(path, "rb") as handle:
            lines = [line.rstrip(b"\r\n") for line in handle]
        telemetry.record_event("file.opened", data={"path": path, "lines": len(lines)})
        return lines

    def write_all(self, path: str, data: bytes) -> int:
        """Open (creating with 0644), truncate to ``len(data)``, then write."""

        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
        try:
            os.ftruncate(fd, len(data))
            written = 0
            view = memoryview(data)
            while written < len(data):
                written += os.write(fd, view[written:])
        finally:
            os.close(fd)
        return written


__all__ = ["LocalFileStore"]
