"""Actions and bindings known to the editor, indexed by mode and key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from tty_editor.runtime.telemetry import span

from .models import ActionRef, Binding


@dataclass(frozen=True, slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    modes: Tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """A binding would fire for the same key and flags as existing ones."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]) -> None:
        self.binding = binding
        self.conflicts = tuple(conflicts)
        clashes = ", ".join(existing.id for existing in self.conflicts)
        super().__init__(
            f"Binding '{binding.id}' ({binding.mode} {binding.key}) clashes with {clashes}"
        )


class KeymapRegistry:
    """Actions by id; bindings looked up by ``(mode, key)``."""

    def __init__(self, *, logger_name: Optional[str] = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_key: Dict[Tuple[str, str], List[str]] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        if action_id not in self._actions:
            raise KeyError(f"Action '{action_id}' is not registered")
        return self._actions[action_id]

    def get_binding(self, binding_id: str) -> Binding:
        if binding_id not in self._bindings:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return self._bindings[binding_id]

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Add ``binding``; with ``replace`` it evicts whatever it clashes with."""

        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "key": binding.key},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            clashes = self.detect_conflicts(binding)
            if not replace:
                if clashes:
                    handle.add_metadata("conflicts", ",".join(b.id for b in clashes))
                    raise KeymapConflictError(binding, clashes)
                if binding.id in self._bindings:
                    raise ValueError(f"Binding id '{binding.id}' already registered")

            for stale in (*clashes, self._bindings.get(binding.id)):
                if stale is not None:
                    self._remove(stale)
            self._bindings[binding.id] = binding
            self._by_key.setdefault((binding.mode, binding.key), []).append(binding.id)
            return binding

    def bindings_for(self, mode: str, key: str) -> List[Binding]:
        return [self._bindings[bid] for bid in self._by_key.get((mode, key), ())]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted({mode for mode, _ in self._by_key})),
        )

    def detect_conflicts(self, binding: Binding) -> List[Binding]:
        """Other bindings on the same key that some flag state could co-fire."""

        return [
            other
            for other in self.bindings_for(binding.mode, binding.key)
            if other.id != binding.id and not binding.excludes(other)
        ]

    def _remove(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        slot = (binding.mode, binding.key)
        ids = self._by_key.get(slot, [])
        if binding.id in ids:
            ids.remove(binding.id)
        if not ids:
            self._by_key.pop(slot, None)


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]
