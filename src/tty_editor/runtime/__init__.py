"""Process-wide services: telemetry, configuration, collaborator protocols."""

from .config import EditorConfig
from .services import ByteSource, FileStore, OutputSink, SizeProvider, TerminalError

__all__ = [
    "EditorConfig",
    "ByteSource",
    "FileStore",
    "OutputSink",
    "SizeProvider",
    "TerminalError",
]
