"""Routes keys to the active mode and performs the switches it requests."""

from __future__ import annotations

from typing import Dict, Optional, Type

from tty_editor.keymaps import KeymapRegistry, KeymapResolver
from tty_editor.keymaps.defaults import load_default_keymaps
from tty_editor.keys import KeyEvent
from tty_editor.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token

KEYMAP_LOGGER = "tty_editor.keymaps"


class ModeManager:
    """Owns the mode instances; the first registered mode starts active.

    The keymap registry and resolver are published in ``context.extras`` so
    modes can find them.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: Optional[KeymapRegistry] = None,
        keymap_resolver: Optional[KeymapResolver] = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None

        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name=KEYMAP_LOGGER)
            if load_defaults:
                load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            keymap_registry, logger_name=KEYMAP_LOGGER
        )
        extras = context.extras
        extras.setdefault("keymap_registry", self.keymap_registry)
        extras.setdefault("keymap_resolver", self.keymap_resolver)
        extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self._active) if self._active else None

    def register_mode(self, mode_cls: Type[Mode], /, **mode_kwargs: object) -> Mode:
        mode = mode_cls(self.context, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        target = self._modes.get(name)
        if target is None:
            raise KeyError(f"Unknown mode '{name}'")
        current = self.active_mode
        if current is target:
            return
        if current is not None:
            current.on_exit(name)
        self._active = name
        target.on_enter(current.name if current else None)
        telemetry.record_event("mode.switch", level="debug", data={"mode": name})

    def handle_key(self, key: KeyEvent) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            f"mode::{mode.name}",
            component=True,
            metadata={"key": key_to_token(key), "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]
