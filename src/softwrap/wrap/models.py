"""Value types produced by the wrap cache and coordinate mapper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WrapSegment:
    """One display row cut from a source line."""

    text: str
    source_line: int
    is_last: bool = True


@dataclass(frozen=True, slots=True)
class DisplayPosition:
    """Where a document cursor lands among the wrapped rows."""

    wrapped_index: int
    segment_index: int
    segment_start: int
    visual_column: int


@dataclass(slots=True)
class CacheStats:
    """Lightweight snapshot describing cache state."""

    entries: int
    width: int
    hits: int
    misses: int


__all__ = ["WrapSegment", "DisplayPosition", "CacheStats"]
