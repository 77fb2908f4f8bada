"""Edit controller: modes, mode switching and key dispatch."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .edit_mode import EditMode
from .prompt_mode import PromptMode
from .prompt_state import PromptState, begin_prompt

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "EditMode",
    "PromptMode",
    "PromptState",
    "begin_prompt",
]
