"""Viewport scrolling and frame construction."""

from .engine import RenderEngine
from .frame import DrawKind, DrawOp, Frame
from .viewport import Viewport

__all__ = ["RenderEngine", "Frame", "DrawOp", "DrawKind", "Viewport"]
