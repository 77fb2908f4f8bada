"""Line buffer: raw lines, their tab-expanded renderings, and the cursor."""

from .document import Document
from .line import TAB, Line, expand_tabs
from .state import Cursor

__all__ = [
    "Document",
    "Line",
    "Cursor",
    "TAB",
    "expand_tabs",
]
