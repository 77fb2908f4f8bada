"""Terminal text editor: line buffer, renderer and keystroke decoder."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "keys",
    "modes",
    "render",
    "runtime",
    "session",
]

__version__ = "0.1.0"
