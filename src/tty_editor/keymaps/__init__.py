"""Declarative keymap registry and resolver.

Default bindings live in ``tty_editor.keymaps.defaults``; they import the
action modules, so they are not re-exported here.
"""

from .models import ActionRef, Binding, WhenClause
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult

__all__ = [
    "ActionRef",
    "Binding",
    "WhenClause",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
