"""Glue between key events, keymap tokens and action handlers."""

from __future__ import annotations

from typing import Dict

from tty_editor.keymaps.resolver import KeymapResolver, ResolutionMatch
from tty_editor.keys import BACKSPACE, ENTER, ESC, KeyEvent
from tty_editor.keys.models import EditorKey
from tty_editor.runtime import telemetry

from .base_mode import ModeContext, ModeResult

_NAMED_BYTES = {ENTER: "ENTER", ESC: "ESC", BACKSPACE: "BACKSPACE"}


def key_to_token(key: KeyEvent) -> str:
    """Name a key the way bindings refer to it.

    Control bytes become ``CTRL+<letter>``; printable ASCII is the character
    itself; anything else is ``BYTE+<n>``.
    """

    code = key.code
    if isinstance(code, EditorKey):
        return code.name
    if code in _NAMED_BYTES:
        return _NAMED_BYTES[code]
    if code < 0x20:
        return f"CTRL+{chr(code + 0x40)}"
    if code < BACKSPACE:
        return chr(code)
    return f"BYTE+{code}"


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def session_flags(context: ModeContext) -> Dict[str, bool]:
    """Flags ``when`` clauses are evaluated against."""

    session = context.session
    return {
        "dirty": session.dirty,
        "has_filename": session.filename is not None,
    }


def run_action(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Invoke the matched action; a handler returning nothing counts as consumed."""

    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)
    return outcome if isinstance(outcome, ModeResult) else ModeResult(consumed=True)


__all__ = [
    "key_to_token",
    "require_keymap_resolver",
    "run_action",
    "session_flags",
]
