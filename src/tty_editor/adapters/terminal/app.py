"""Command-line entry point: ``tty-editor [FILE]``."""

from __future__ import annotations

import argparse
import sys
from contextlib import suppress
from typing import Optional, Sequence

from tty_editor.runtime import telemetry
from tty_editor.runtime.config import EditorConfig
from tty_editor.runtime.services import TerminalError

from .controller import TerminalEditor
from .files import LocalFileStore
from .raw import RawTerminal


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tty-editor", description="Edit a text file in the terminal."
    )
    parser.add_argument("file", nargs="?", help="File to open (created on save)")
    parser.add_argument(
        "--tab-stop",
        type=int,
        default=None,
        help="Columns per tab stop (default: $TTY_EDITOR_TAB_STOP or 8)",
    )
    parser.add_argument(
        "--quit-times",
        type=int,
        default=None,
        help="Extra Ctrl-Q presses needed to discard changes (default: 1)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="Telemetry preset; logs go to $TTY_EDITOR_LOG_FILE",
    )
    return parser.parse_args(argv)


def _report_fatal(terminal: RawTerminal, exc: Exception) -> None:
    with suppress(OSError):
        terminal.clear_screen()
    source = getattr(exc, "source", None) or type(exc).__name__
    reason = getattr(exc, "reason", None) or getattr(exc, "strerror", None) or str(exc)
    telemetry.record_event(
        "editor.fatal", level="error", data={"source": source, "reason": reason}
    )
    print(f"{source}: {reason}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    try:
        config = EditorConfig.from_env().with_overrides(
            tab_stop=args.tab_stop, quit_times=args.quit_times
        )
    except ValueError as exc:
        print(f"tty-editor: {exc}", file=sys.stderr)
        return 2

    terminal = RawTerminal()
    try:
        with terminal:
            editor = TerminalEditor(terminal, LocalFileStore(), config=config)
            if args.file:
                editor.open(args.file)
            return editor.run()
    except (TerminalError, OSError) as exc:
        _report_fatal(terminal, exc)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover - manual entry point
    run()
