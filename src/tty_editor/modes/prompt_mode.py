"""Single-line prompt shown in the message bar (e.g. "Save as")."""

from __future__ import annotations

from typing import Optional

from tty_editor.keys import KeyEvent

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap_resolver, run_action, session_flags
from .prompt_state import PROMPT_MODE, prompt_state, refresh_prompt


class PromptMode(Mode):
    """Collects printable ASCII until a prompt binding submits or cancels."""

    name = PROMPT_MODE

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)

    def on_enter(self, previous: Optional[str]) -> None:
        refresh_prompt(self.context)
        self.context.bus.emit("prompt.start", prompt_state(self.context).template)

    def on_exit(self, next_mode: Optional[str]) -> None:
        self.context.extras.pop("prompt_state", None)

    def handle_key(self, key: KeyEvent) -> ModeResult:
        token = key_to_token(key)
        result = self._resolver.resolve(
            self.name, token, context=session_flags(self.context)
        )
        if result.match is not None:
            return run_action(self.context, result.match)

        if not key.is_printable:
            refresh_prompt(self.context)
            return ModeResult(consumed=False, status="miss", message=token)
        prompt_state(self.context).text += chr(key.code)
        refresh_prompt(self.context)
        return ModeResult(consumed=True, status="editing")


__all__ = ["PromptMode"]
