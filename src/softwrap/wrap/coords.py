"""Translate between document cursors and wrapped row indices."""

from __future__ import annotations

from typing import Optional, Tuple

from .cache import WrapCache
from .models import DisplayPosition

Cursor = Tuple[int, int]  # (line, column)


class CoordinateMapper:
    """Bidirectional mapping over a shared ``WrapCache``.

    Segment offsets are the sum of earlier segment lengths. Wrapping drops
    the space a row was broken at, so no separator is counted between rows.
    """

    def __init__(self, cache: WrapCache) -> None:
        self.cache = cache

    def rows_before(self, line: int) -> int:
        limit = min(line, self.cache.line_count())
        return sum(len(self.cache.get_segments(index)) for index in range(limit))

    def locate(self, line: int, column: int) -> DisplayPosition:
        wrapped_index = self.rows_before(line)
        if line < 0 or line >= self.cache.line_count():
            return DisplayPosition(wrapped_index, 0, 0, column)

        segments = self.cache.get_segments(line)
        consumed = 0
        last = len(segments) - 1
        for i, segment in enumerate(segments):
            if column <= consumed + len(segment.text) or i == last:
                return DisplayPosition(
                    wrapped_index=wrapped_index + i,
                    segment_index=i,
                    segment_start=consumed,
                    visual_column=column - consumed,
                )
            consumed += len(segment.text)
        raise AssertionError("unreachable: segments are never empty")

    def wrapped_index_of_cursor(self, line: int, column: int) -> int:
        return self.locate(line, column).wrapped_index

    def cursor_at_wrapped_index(
        self, target: int, preferred_visual_column: int = 0
    ) -> Optional[Cursor]:
        """Return the cursor on row ``target``, or ``None`` when out of range.

        ``preferred_visual_column`` is the in-row offset to aim for; it is
        clamped to the row and then to the source line.
        """

        if target < 0:
            return None

        wrapped_index = 0
        for line in range(self.cache.line_count()):
            segments = self.cache.get_segments(line)
            if wrapped_index + len(segments) > target:
                offset = target - wrapped_index
                segment_start = sum(len(s.text) for s in segments[:offset])
                column = segment_start + max(preferred_visual_column, 0)
                column = min(column, segment_start + len(segments[offset].text))
                column = min(column, len(self.cache.lines[line]))
                return (line, column)
            wrapped_index += len(segments)
        return None


__all__ = ["CoordinateMapper", "Cursor"]
