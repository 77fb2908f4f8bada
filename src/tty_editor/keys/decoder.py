"""Escape-sequence state machine over a ``ByteSource``."""

from __future__ import annotations

from typing import Optional

from tty_editor.runtime import telemetry
from tty_editor.runtime.services import ByteSource

from .models import ESC, EditorKey, KeyEvent

_TILDE_KEYS = {
    ord("1"): EditorKey.HOME,
    ord("3"): EditorKey.DELETE,
    ord("4"): EditorKey.END,
    ord("5"): EditorKey.PAGE_UP,
    ord("6"): EditorKey.PAGE_DOWN,
    ord("7"): EditorKey.HOME,
    ord("8"): EditorKey.END,
}

_CSI_KEYS = {
    ord("A"): EditorKey.ARROW_UP,
    ord("B"): EditorKey.ARROW_DOWN,
    ord("C"): EditorKey.ARROW_RIGHT,
    ord("D"): EditorKey.ARROW_LEFT,
    ord("H"): EditorKey.HOME,
    ord("F"): EditorKey.END,
}

_SS3_KEYS = {
    ord("H"): EditorKey.HOME,
    ord("F"): EditorKey.END,
}


class KeyDecoder:
    """Turns bytes from ``source`` into ``KeyEvent`` values.

    ``timeout`` is the per-byte wait handed to the source. A sequence cut
    short by that timeout decodes as a bare ESC.
    """

    def __init__(self, source: ByteSource, *, timeout: Optional[float] = 0.1) -> None:
        self.source = source
        self.timeout = timeout

    def poll_key(self) -> Optional[KeyEvent]:
        """Return the next key, or ``None`` when no byte arrived in time."""

        first = self.source.read_byte(self.timeout)
        if first is None:
            return None
        if first != ESC:
            return KeyEvent(first)
        return self._decode_escape()

    def read_key(self) -> KeyEvent:
        """Block until a full key is available."""

        while True:
            key = self.poll_key()
            if key is not None:
                return key

    def _next(self) -> Optional[int]:
        return self.source.read_byte(self.timeout)

    def _decode_escape(self) -> KeyEvent:
        escape = KeyEvent(ESC)
        lead = self._next()
        if lead is None:
            return escape
        second = self._next()
        if second is None:
            return escape

        if lead == ord("["):
            if ord("0") <= second <= ord("9"):
                third = self._next()
                if third != ord("~"):
                    return escape
                key = _TILDE_KEYS.get(second)
            else:
                key = _CSI_KEYS.get(second)
        elif lead == ord("O"):
            key = _SS3_KEYS.get(second)
        else:
            key = None

        if key is None:
            telemetry.record_event(
                "keys.unknown_sequence",
                level="debug",
                data={"sequence": bytes([ESC, lead, second])},
            )
            return escape
        return KeyEvent.special(key)


__all__ = ["KeyDecoder"]
