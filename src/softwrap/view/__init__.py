"""Viewport handling and the session façade used by embedding editors."""

from .session import WrapSession
from .viewport import Viewport, clamp_offset

__all__ = ["WrapSession", "Viewport", "clamp_offset"]
