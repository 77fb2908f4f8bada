"""Render/read/dispatch loop binding the core to a terminal."""

from __future__ import annotations

import time
from typing import Optional, Protocol

from tty_editor.buffer import Document
from tty_editor.keymaps import KeymapRegistry, KeymapResolver
from tty_editor.keymaps.defaults import load_default_keymaps
from tty_editor.keys import KeyDecoder
from tty_editor.modes import EditMode, ModeBus, ModeContext, ModeResult, PromptMode
from tty_editor.modes.mode_manager import ModeManager
from tty_editor.render import Frame, RenderEngine
from tty_editor.render.frame import CLEAR_SCREEN, CURSOR_HOME
from tty_editor.runtime import telemetry
from tty_editor.runtime.config import EditorConfig
from tty_editor.runtime.services import ByteSource, FileStore, OutputSink, SizeProvider
from tty_editor.session import Clock, EditorSession

STATUS_BAR_ROWS = 2


class Terminal(ByteSource, OutputSink, SizeProvider, Protocol):
    """Everything the loop needs from the terminal in one object."""


def create_default_manager(
    session: EditorSession,
    files: FileStore,
    *,
    registry: Optional[KeymapRegistry] = None,
) -> ModeManager:
    """Build a ModeManager with the edit and prompt modes + default keymaps."""

    if registry is None:
        registry = KeymapRegistry(logger_name="tty_editor.keymaps")
        load_default_keymaps(registry)
    resolver = KeymapResolver(registry, logger_name="tty_editor.keymaps")
    context = ModeContext(session=session, files=files, bus=ModeBus(), extras={})
    manager = ModeManager(
        context,
        keymap_registry=registry,
        keymap_resolver=resolver,
        load_defaults=False,
    )
    manager.register_mode(EditMode)
    manager.register_mode(PromptMode)
    return manager


class TerminalEditor:
    """Owns one session and drives it from ``terminal`` until quit."""

    def __init__(
        self,
        terminal: Terminal,
        files: FileStore,
        *,
        config: Optional[EditorConfig] = None,
        clock: Clock = time.time,
        read_timeout: Optional[float] = 0.1,
    ) -> None:
        self.terminal = terminal
        self.files = files
        self.config = config or EditorConfig()
        self.logger = telemetry.get_logger("tty_editor.terminal")

        rows, cols = terminal.get_size()
        self.session = EditorSession(
            config=self.config,
            rows=max(rows - STATUS_BAR_ROWS, 0),
            cols=cols,
            clock=clock,
        )
        self.decoder = KeyDecoder(terminal, timeout=read_timeout)
        self.renderer = RenderEngine(self.config)
        self.manager = create_default_manager(self.session, files)
        self._subscribe_events()

    @property
    def bus(self) -> ModeBus:
        return self.manager.context.bus

    def open(self, path: str) -> None:
        """Load ``path``; a missing file starts an empty document bound to it."""

        with telemetry.span("file::open", component="file", metadata={"path": path}):
            try:
                lines = self.files.read_lines(path)
            except FileNotFoundError:
                lines = []
        self.session.document = Document.from_lines(
            lines, tab_stop=self.config.tab_stop
        )
        self.session.filename = path
        self.session.cursor.move_to(0, 0)

    def refresh_screen(self) -> Frame:
        frame = self.renderer.render(self.session)
        self.terminal.write(frame.to_bytes())
        return frame

    def step(self) -> ModeResult:
        """Block for one key and apply it."""

        key = self.decoder.read_key()
        return self.manager.handle_key(key)

    def run(self) -> int:
        self.session.set_status(self.config.help_message)
        keymaps = self.manager.keymap_registry.stats()
        telemetry.record_event(
            "editor.start",
            data={
                "file": self.session.filename or "",
                "lines": len(self.session.document),
                "bindings": keymaps.binding_count,
                "modes": ",".join(keymaps.modes),
            },
        )
        while True:
            self.refresh_screen()
            result = self.step()
            if result.quit:
                break
        self.terminal.write(CLEAR_SCREEN + CURSOR_HOME)
        return 0

    def _subscribe_events(self) -> None:
        for event in (
            "prompt.start",
            "prompt.submit",
            "prompt.cancel",
            "file.saved",
            "file.save_failed",
            "editor.quit",
        ):
            self.bus.subscribe(
                event, lambda payload, name=event: self._log_event(name, payload)
            )

    def _log_event(self, name: str, payload: object | None) -> None:
        level = "error" if name.endswith("failed") else "debug"
        telemetry.record_event(name, level=level, data={"payload": payload})


__all__ = ["TerminalEditor", "create_default_manager", "Terminal"]
