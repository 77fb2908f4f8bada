"""Built-in keymaps for the edit and prompt modes."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Mapping, Sequence

from tty_editor.actions import editing, file, motion, prompt

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(id="edit.newline", handler=editing.insert_newline, description="Split line"),
    ActionRef(
        id="edit.delete_backward",
        handler=editing.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=editing.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(id="edit.noop", handler=editing.noop, description="Ignore the key"),
    ActionRef(id="cursor.left", handler=motion.move_left, description="Move left"),
    ActionRef(id="cursor.right", handler=motion.move_right, description="Move right"),
    ActionRef(id="cursor.up", handler=motion.move_up, description="Move up"),
    ActionRef(id="cursor.down", handler=motion.move_down, description="Move down"),
    ActionRef(
        id="cursor.line_start", handler=motion.line_start, description="Start of line"
    ),
    ActionRef(id="cursor.line_end", handler=motion.line_end, description="End of line"),
    ActionRef(id="cursor.page_up", handler=motion.page_up, description="Page up"),
    ActionRef(id="cursor.page_down", handler=motion.page_down, description="Page down"),
    ActionRef(id="file.save", handler=file.save, description="Write to the bound file"),
    ActionRef(
        id="file.save_as", handler=file.save_as, description="Prompt for a filename"
    ),
    ActionRef(id="editor.quit", handler=file.quit_editor, description="Quit"),
    ActionRef(
        id="editor.quit_guarded",
        handler=file.quit_guarded,
        description="Quit after confirming unsaved changes",
    ),
    ActionRef(id="prompt.submit", handler=prompt.submit, description="Accept input"),
    ActionRef(id="prompt.cancel", handler=prompt.cancel, description="Abort prompt"),
    ActionRef(id="prompt.erase", handler=prompt.erase, description="Erase last char"),
)


def _bind(
    binding_id: str, mode: str, key: str, action_id: str, *when: str
) -> Binding:
    return Binding(id=binding_id, mode=mode, key=key, action_id=action_id, when=when)


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("edit.enter", "edit", "ENTER", "edit.newline"),
    _bind("edit.backspace", "edit", "BACKSPACE", "edit.delete_backward"),
    _bind("edit.ctrl_h", "edit", "CTRL+H", "edit.delete_backward"),
    _bind("edit.delete", "edit", "DELETE", "edit.delete_forward"),
    _bind("edit.arrow_left", "edit", "ARROW_LEFT", "cursor.left"),
    _bind("edit.arrow_right", "edit", "ARROW_RIGHT", "cursor.right"),
    _bind("edit.arrow_up", "edit", "ARROW_UP", "cursor.up"),
    _bind("edit.arrow_down", "edit", "ARROW_DOWN", "cursor.down"),
    _bind("edit.home", "edit", "HOME", "cursor.line_start"),
    _bind("edit.end", "edit", "END", "cursor.line_end"),
    _bind("edit.page_up", "edit", "PAGE_UP", "cursor.page_up"),
    _bind("edit.page_down", "edit", "PAGE_DOWN", "cursor.page_down"),
    _bind("edit.save", "edit", "CTRL+S", "file.save", "has_filename"),
    _bind("edit.save_as", "edit", "CTRL+S", "file.save_as", "!has_filename"),
    _bind("edit.quit", "edit", "CTRL+Q", "editor.quit", "!dirty"),
    _bind("edit.quit_dirty", "edit", "CTRL+Q", "editor.quit_guarded", "dirty"),
    _bind("edit.interrupt", "edit", "CTRL+C", "editor.quit", "!dirty"),
    _bind("edit.interrupt_dirty", "edit", "CTRL+C", "editor.quit_guarded", "dirty"),
    _bind("edit.refresh", "edit", "CTRL+L", "edit.noop"),
    _bind("edit.escape", "edit", "ESC", "edit.noop"),
    _bind("prompt.enter", "prompt", "ENTER", "prompt.submit"),
    _bind("prompt.escape", "prompt", "ESC", "prompt.cancel"),
    _bind("prompt.backspace", "prompt", "BACKSPACE", "prompt.erase"),
    _bind("prompt.ctrl_h", "prompt", "CTRL+H", "prompt.erase"),
    _bind("prompt.delete", "prompt", "DELETE", "prompt.erase"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
    rebind: Mapping[str, str] | None = None,
) -> None:
    """Register built-in actions and bindings.

    ``rebind`` maps a default binding id to a different key token, e.g.
    ``{"edit.save": "CTRL+W", "edit.save_as": "CTRL+W"}``.
    """

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())
    keys = dict(rebind or {})

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        if binding.id in keys:
            binding = _rebound(binding, keys[binding.id])
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


def _rebound(binding: Binding, key: str) -> Binding:
    return replace(binding, key=key)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
