"""Incremental word wrapping and display coordinate mapping."""

from .cache import Segments, WrapCache
from .coords import CoordinateMapper, Cursor
from .models import CacheStats, DisplayPosition, WrapSegment
from .window import VisibleWindow
from .wrapper import Wrapper, segment_line, wrap_line

__all__ = [
    "WrapSegment",
    "DisplayPosition",
    "CacheStats",
    "WrapCache",
    "Segments",
    "VisibleWindow",
    "CoordinateMapper",
    "Cursor",
    "Wrapper",
    "wrap_line",
    "segment_line",
]
