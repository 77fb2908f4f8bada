"""POSIX terminal host: raw mode, local files, and the main loop."""

from .controller import TerminalEditor, create_default_manager
from .files import LocalFileStore
from .raw import RawTerminal

__all__ = [
    "RawTerminal",
    "LocalFileStore",
    "TerminalEditor",
    "create_default_manager",
]
