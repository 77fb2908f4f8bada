"""Default editing mode: keymap dispatch with byte insertion as fallback."""

from __future__ import annotations

from tty_editor.actions import editing
from tty_editor.keys import KeyEvent

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap_resolver, run_action, session_flags


class EditMode(Mode):
    """Bound keys run their action; any other byte is inserted at the cursor.

    Every key except a refused quit re-arms the unsaved-changes guard.
    """

    name = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyEvent) -> ModeResult:
        token = key_to_token(key)
        result = self._resolver.resolve(
            self.name, token, context=session_flags(self.context)
        )
        if result.match is not None:
            outcome = run_action(self.context, result.match)
        elif key.is_byte:
            outcome = editing.insert_byte(self.context, key.code)
        else:
            outcome = ModeResult(consumed=False, status="miss", message=token)

        if outcome.status != "quit_refused":
            self.context.session.reset_quit_guard()
        return outcome


__all__ = ["EditMode"]
