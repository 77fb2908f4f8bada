"""Raw byte stream to logical key events."""

from .decoder import KeyDecoder
from .models import BACKSPACE, ENTER, ESC, EditorKey, KeyEvent, ctrl_key

__all__ = [
    "KeyDecoder",
    "KeyEvent",
    "EditorKey",
    "ctrl_key",
    "BACKSPACE",
    "ENTER",
    "ESC",
]
