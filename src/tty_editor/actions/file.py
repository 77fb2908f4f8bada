"""Saving the document and leaving the editor."""

from __future__ import annotations

from tty_editor.modes.base_mode import ModeContext, ModeResult
from tty_editor.modes.prompt_state import begin_prompt
from tty_editor.runtime import telemetry

SAVE_AS_PROMPT = "Save as: {} (ESC to cancel)"


def save(context: ModeContext, match) -> ModeResult:
    del match
    return write_document(context)


def save_as(context: ModeContext, match) -> ModeResult:
    """Ask for a filename first; used while the session has none."""

    del match
    return begin_prompt(
        context, SAVE_AS_PROMPT, _save_with_filename, on_cancel=_save_aborted
    )


def _save_with_filename(context: ModeContext, filename: str) -> ModeResult:
    context.session.filename = filename
    return write_document(context)


def _save_aborted(context: ModeContext) -> ModeResult:
    context.session.set_status("Save aborted")
    return ModeResult(consumed=True, status="save_aborted")


def write_document(context: ModeContext) -> ModeResult:
    session = context.session
    filename = session.filename
    if filename is None:
        raise RuntimeError("write_document requires a filename")

    data = session.document.serialize()
    with telemetry.span(
        "file::save", component="file", metadata={"path": filename}
    ) as handle:
        try:
            written = context.files.write_all(filename, data)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            handle.add_metadata("error", reason)
            session.set_status(f"Can't save! I/O error: {reason}")
            context.bus.emit("file.save_failed", {"path": filename, "error": reason})
            return ModeResult(consumed=True, status="save_failed", message=reason)

    session.document.mark_clean()
    session.set_status(f"{written} bytes written to disk")
    telemetry.record_event("file.saved", data={"path": filename, "bytes": written})
    context.bus.emit("file.saved", {"path": filename, "bytes": written})
    return ModeResult(consumed=True, status="saved", message=filename)


def quit_editor(context: ModeContext, match) -> ModeResult:
    del match
    context.bus.emit("editor.quit", None)
    return ModeResult(consumed=True, status="quit")


def quit_guarded(context: ModeContext, match) -> ModeResult:
    """Quit with unsaved changes only after repeated confirmation."""

    session = context.session
    if session.dirty and session.quit_times > 0:
        session.set_status(
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-Q {session.quit_times} more times to quit."
        )
        session.quit_times -= 1
        return ModeResult(consumed=True, status="quit_refused")
    return quit_editor(context, match)


__all__ = [
    "SAVE_AS_PROMPT",
    "save",
    "save_as",
    "write_document",
    "quit_editor",
    "quit_guarded",
]
