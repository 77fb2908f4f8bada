"""Picks the binding that fires for a key in a given mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Mapping, Optional

from tty_editor.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


MISS = ResolutionResult("miss")


class KeymapResolver:
    """Filters a key's bindings by session flags and ranks the survivors.

    Highest ``priority`` wins; ties go to the lowest binding id so the outcome
    never depends on registration order.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: Optional[str] = None
    ) -> None:
        self.registry = registry
        self._logger_name = logger_name

    def candidates(
        self, mode: str, key: str, flags: Mapping[str, bool]
    ) -> List[Binding]:
        eligible = [b for b in self.registry.bindings_for(mode, key) if b.allows(flags)]
        return sorted(eligible, key=lambda b: (-b.priority, b.id))

    def resolve(
        self,
        mode: str,
        key: str,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "key": key},
        ) as handle:
            ranked = self.candidates(mode, key, context or {})
            if not ranked:
                handle.add_metadata("status", "miss")
                return MISS
            best = ranked[0]
            handle.add_metadata("binding_id", best.id)
            action = self.registry.get_action(best.action_id)
            return ResolutionResult("match", ResolutionMatch(best, action))


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
