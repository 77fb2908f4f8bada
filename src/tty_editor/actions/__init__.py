"""Editing verbs invoked through keymap bindings."""

from . import editing, file, motion, prompt
from .editing import delete_backward, delete_forward, insert_byte, insert_newline, noop
from .file import quit_editor, quit_guarded, save, save_as, write_document
from .motion import move_cursor

__all__ = [
    "editing",
    "file",
    "motion",
    "prompt",
    "insert_byte",
    "insert_newline",
    "delete_backward",
    "delete_forward",
    "noop",
    "save",
    "save_as",
    "write_document",
    "quit_editor",
    "quit_guarded",
    "move_cursor",
]
