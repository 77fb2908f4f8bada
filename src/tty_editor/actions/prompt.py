"""Actions bound inside prompt mode."""

from __future__ import annotations

from tty_editor.modes.base_mode import ModeContext, ModeResult
from tty_editor.modes.prompt_state import prompt_state, refresh_prompt

RETURN_MODE = "edit"


def submit(context: ModeContext, match) -> ModeResult:
    del match
    state = prompt_state(context)
    if not state.text:
        return ModeResult(consumed=True, status="prompt_empty")
    context.session.set_status("")
    context.bus.emit("prompt.submit", state.text)
    outcome = state.on_submit(context, state.text)
    outcome.switch_to = RETURN_MODE
    return outcome


def cancel(context: ModeContext, match) -> ModeResult:
    del match
    state = prompt_state(context)
    context.session.set_status("")
    context.bus.emit("prompt.cancel", state.text)
    if state.on_cancel is not None:
        outcome = state.on_cancel(context)
    else:
        outcome = ModeResult(consumed=True, status="prompt_cancel")
    outcome.switch_to = RETURN_MODE
    return outcome


def erase(context: ModeContext, match) -> ModeResult:
    del match
    state = prompt_state(context)
    state.text = state.text[:-1]
    refresh_prompt(context)
    return ModeResult(consumed=True, status="editing")


__all__ = ["submit", "cancel", "erase"]
