"""Per-line memoization of wrap segments."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from softwrap.runtime import telemetry

from .models import CacheStats, WrapSegment
from .wrapper import Wrapper, segment_line, wrap_line

Segments = Tuple[WrapSegment, ...]

LOGGER_NAME = "softwrap.wrap"


class WrapCache:
    """Index-keyed wrap results for one line sequence at one width.

    The cache only ever reads ``lines``. Whoever mutates the sequence must
    call one of the invalidation entry points before the next read:

    * ``invalidate_line`` after an edit confined to one line,
    * ``invalidate_from`` after lines were inserted or removed, since every
      later index now names a different line,
    * ``set_width`` / ``invalidate_all`` when the wrap width changes.
    """

    def __init__(
        self,
        lines: Sequence[str],
        width: int,
        *,
        wrapper: Wrapper = wrap_line,
        logger_name: Optional[str] = LOGGER_NAME,
    ) -> None:
        self._lines = lines
        self._width = max(int(width), 1)
        self._wrapper = wrapper
        self._entries: Dict[int, Segments] = {}
        self._logger_name = logger_name
        self._hits = 0
        self._misses = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def lines(self) -> Sequence[str]:
        return self._lines

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, index: object) -> bool:
        return index in self._entries

    def line_count(self) -> int:
        return len(self._lines)

    def get_segments(self, index: int) -> Segments:
        cached = self._entries.get(index)
        if cached is not None:
            self._hits += 1
            return cached

        if index < 0 or index >= len(self._lines):
            return (WrapSegment(text="", source_line=index, is_last=True),)

        self._misses += 1
        segments = segment_line(
            self._lines[index], self._width, index, wrapper=self._wrapper
        )
        self._entries[index] = segments
        return segments

    def invalidate_line(self, index: int) -> None:
        if self._entries.pop(index, None) is not None:
            self._record("invalidate_line", index=index)

    def invalidate_from(self, index: int) -> None:
        stale = [key for key in self._entries if key >= index]
        for key in stale:
            del self._entries[key]
        if stale:
            self._record("invalidate_from", index=index, dropped=len(stale))

    def invalidate_all(self) -> None:
        dropped = len(self._entries)
        self._entries.clear()
        self._record("invalidate_all", dropped=dropped)

    def set_width(self, width: int) -> bool:
        """Adopt ``width``; returns ``True`` when the cache was flushed."""

        width = max(int(width), 1)
        if width == self._width:
            return False
        previous, self._width = self._width, width
        self._record("width_changed", previous=previous, width=width)
        self.invalidate_all()
        return True

    def rebind(self, lines: Sequence[str]) -> None:
        """Point the cache at a different line sequence (e.g. a reloaded file)."""

        self._lines = lines
        self.invalidate_all()

    def stats(self) -> CacheStats:
        return CacheStats(
            entries=len(self._entries),
            width=self._width,
            hits=self._hits,
            misses=self._misses,
        )

    def _record(self, name: str, **data: object) -> None:
        telemetry.record_event(
            f"wrap_cache::{name}",
            level="debug",
            data={"entries": len(self._entries), **data},
            logger_name=self._logger_name,
        )


__all__ = ["WrapCache", "Segments"]
