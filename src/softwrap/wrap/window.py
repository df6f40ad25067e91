"""Resolve the slice of wrapped rows a viewport needs."""

from __future__ import annotations

from typing import List, Optional

from softwrap.runtime.telemetry import span

from .cache import WrapCache
from .models import WrapSegment


class VisibleWindow:
    """Walks source lines only as far as the requested window reaches."""

    def __init__(self, cache: WrapCache, *, logger_name: Optional[str] = None) -> None:
        self.cache = cache
        self._logger_name = logger_name or "softwrap.wrap"

    def get_visible(self, start_offset: int, count: int) -> List[WrapSegment]:
        """Return up to ``count`` rows starting at wrapped index ``start_offset``.

        Short documents yield fewer rows; the caller pads the remainder.
        """

        if count <= 0:
            return []

        end = start_offset + count
        result: List[WrapSegment] = []
        with span(
            "wrap::visible",
            logger_name=self._logger_name,
            metadata={"offset": start_offset, "count": count},
        ) as handle:
            wrapped_index = 0
            line_count = self.cache.line_count()
            for line_index in range(line_count):
                for segment in self.cache.get_segments(line_index):
                    if wrapped_index >= start_offset:
                        result.append(segment)
                    wrapped_index += 1
                    if wrapped_index >= end:
                        handle.add_metadata("lines_walked", line_index + 1)
                        return result
            handle.add_metadata("lines_walked", line_count)
        return result

    def total_rows(self) -> int:
        """Count every wrapped row; touches the whole document."""

        return sum(
            len(self.cache.get_segments(index))
            for index in range(self.cache.line_count())
        )


__all__ = ["VisibleWindow"]
