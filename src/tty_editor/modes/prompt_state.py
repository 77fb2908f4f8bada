"""State carried by an open prompt, kept apart from the mode itself."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .base_mode import ModeContext, ModeResult

PROMPT_MODE = "prompt"

SubmitHandler = Callable[[ModeContext, str], ModeResult]
CancelHandler = Callable[[ModeContext], ModeResult]


@dataclass(slots=True)
class PromptState:
    """What is being asked and what to do with the answer.

    ``template`` contains one ``{}`` placeholder for the typed text.
    """

    template: str
    on_submit: SubmitHandler
    on_cancel: Optional[CancelHandler] = None
    text: str = ""

    def display(self) -> str:
        return self.template.format(self.text)


def begin_prompt(
    context: ModeContext,
    template: str,
    on_submit: SubmitHandler,
    *,
    on_cancel: Optional[CancelHandler] = None,
) -> ModeResult:
    """Stash a prompt request and ask the manager to switch to prompt mode."""

    context.extras["prompt_state"] = PromptState(
        template=template, on_submit=on_submit, on_cancel=on_cancel
    )
    return ModeResult(consumed=True, switch_to=PROMPT_MODE, status="prompt_start")


def prompt_state(context: ModeContext) -> PromptState:
    state = context.extras.get("prompt_state")
    if not isinstance(state, PromptState):
        raise RuntimeError("prompt mode entered without a PromptState")
    return state


def refresh_prompt(context: ModeContext) -> None:
    context.session.set_status(prompt_state(context).display())


__all__ = [
    "PROMPT_MODE",
    "PromptState",
    "begin_prompt",
    "prompt_state",
    "refresh_prompt",
]
