"""Mode protocol plus the context and results passed between modes."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, DefaultDict, Dict, List, Optional

from tty_editor.keys import KeyEvent
from tty_editor.runtime.services import FileStore
from tty_editor.session import EditorSession

Listener = Callable[[object], None]


@dataclass(slots=True)
class ModeResult:
    """Outcome of one key.

    ``status`` is a short tag (``"insert"``, ``"saved"``, ``"quit"`` ...);
    ``switch_to`` names the mode the manager should activate next.
    """

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None

    @property
    def quit(self) -> bool:
        return self.status == "quit"


@dataclass(slots=True)
class ModeContext:
    session: EditorSession
    files: FileStore
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Synchronous fan-out of named events to listeners."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, event: str, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def emit(self, event: str, payload: object | None = None) -> None:
        for listener in list(self._listeners.get(event, ())):
            listener(payload)


class Mode:
    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        """Called after the manager makes this mode active."""

    def on_exit(self, next_mode: Optional[str]) -> None:
        """Called before the manager leaves this mode."""

    def handle_key(self, key: KeyEvent) -> ModeResult:  # pragma: no cover
        raise NotImplementedError
