"""Session façade wiring a document to its wrap cache, mapper and viewport."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from softwrap.buffer import (
    Cursor,
    CursorState,
    LineDelta,
    LineDocument,
    ensure_cursor,
)
from softwrap.runtime import telemetry
from softwrap.runtime.config import WrapSettings
from softwrap.wrap import (
    CoordinateMapper,
    VisibleWindow,
    WrapCache,
    WrapSegment,
    Wrapper,
    wrap_line,
)

from .viewport import Viewport


class WrapSession:
    """Everything an editor needs to render and navigate a wrapped document.

    The session owns exactly one ``WrapCache`` and hands it to the resolver
    and the mapper. Edits made through the session invalidate the cache
    precisely; editors that mutate ``document`` themselves must call
    ``on_line_edited`` or ``on_lines_inserted_or_removed`` afterwards.
    """

    def __init__(
        self,
        document: Optional[LineDocument] = None,
        *,
        width: int = 80,
        height: int = 30,
        settings: Optional[WrapSettings] = None,
        wrapper: Wrapper = wrap_line,
        name: str = "default",
    ) -> None:
        self.name = name
        self.settings = settings or WrapSettings()
        self.document = document if document is not None else LineDocument()
        self.state = CursorState()
        self.width = width
        self.height = height
        self.cache = WrapCache(
            self.document, self.settings.wrap_width_for(width), wrapper=wrapper
        )
        self.window = VisibleWindow(self.cache)
        self.mapper = CoordinateMapper(self.cache)
        self.viewport = Viewport(height=self.settings.visible_height_for(height))

    @classmethod
    def from_text(cls, text: str, **kwargs: object) -> "WrapSession":
        return cls(LineDocument.from_text(text), **kwargs)  # type: ignore[arg-type]

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def offset_y(self) -> int:
        return self.viewport.offset_y

    @property
    def wrap_width(self) -> int:
        return self.cache.width

    @property
    def visible_height(self) -> int:
        return self.viewport.height

    # -- editing collaborator -------------------------------------------------

    def on_line_edited(self, index: int) -> None:
        self.cache.invalidate_line(index)
        self._clamp_cursor()

    def on_lines_inserted_or_removed(self, from_index: int) -> None:
        self.cache.invalidate_from(from_index)
        self._clamp_cursor()

    def on_width_changed(self, display_width: int) -> None:
        """Re-derive the wrap width from a new display width."""

        self.width = display_width
        if self.cache.set_width(self.settings.wrap_width_for(display_width)):
            self.state.forget_row()
            self._follow()

    def resize(self, width: int, height: int) -> None:
        with self._operation("resize", width=width, height=height):
            self.height = height
            self.viewport.resize(self.settings.visible_height_for(height))
            self.on_width_changed(width)
            self._follow()

    def apply(self, delta: LineDelta) -> None:
        if delta.shifted:
            self.on_lines_inserted_or_removed(delta.start)
        else:
            self.on_line_edited(delta.start)

    def set_line(self, index: int, text: str) -> None:
        with self._operation("set_line", line=index):
            self.apply(self.document.set_line(index, text))
            self._clamp_cursor()

    def insert_text(self, text: str) -> None:
        with self._operation("insert_text", chars=len(text)):
            delta, cursor = self.document.insert_text(self.cursor, text)
            self.apply(delta)
            self.state.set_cursor(*cursor)
            self._follow()

    def delete_text(self, count: int = 1) -> None:
        """Delete up to ``count`` characters after the cursor on its line."""

        with self._operation("delete_text", chars=count):
            self.apply(self.document.delete_text(self.cursor, count))

    def delete_backward(self) -> bool:
        line, column = self.cursor
        if column == 0:
            if line == 0:
                return False
            self.state.set_cursor(line - 1, len(self.document[line - 1]))
            self.join_with_next(line - 1)
            return True
        self.state.set_cursor(line, column - 1)
        self.delete_text(1)
        return True

    def insert_tab(self) -> None:
        self.insert_text(" " * self.settings.tab_width)

    def split_line(self) -> None:
        with self._operation("split_line"):
            self.apply(self.document.split_line(self.cursor))
            self.state.set_cursor(self.cursor[0] + 1, 0)
            self._follow()

    def join_with_next(self, index: Optional[int] = None) -> None:
        with self._operation("join_with_next"):
            line = self.cursor[0] if index is None else index
            self.apply(self.document.join_with_next(line))
            self._clamp_cursor()

    def insert_lines(self, index: int, lines: Iterable[str]) -> None:
        with self._operation("insert_lines", line=index):
            self.apply(self.document.insert_lines(index, lines))
            self._clamp_cursor()

    def delete_lines(self, start: int, end: int) -> None:
        with self._operation("delete_lines", start=start, end=end):
            self.apply(self.document.delete_lines(start, end))
            self._clamp_cursor()

    # -- rendering collaborator -----------------------------------------------

    def visible_segments(self) -> List[WrapSegment]:
        return self.window.get_visible(self.viewport.offset_y, self.viewport.height)

    # -- navigation collaborator ----------------------------------------------

    def cursor_wrapped_index(self) -> int:
        if self.state.display_row is not None:
            return self.state.display_row
        return self.mapper.wrapped_index_of_cursor(*self.cursor)

    def set_cursor(self, line: int, column: int) -> None:
        ensure_cursor(self.document, (line, column))
        self.state.set_cursor(line, column)
        self._follow()

    def move_up(self) -> bool:
        return self._move_rows(-1)

    def move_down(self) -> bool:
        return self._move_rows(1)

    def page_up(self) -> bool:
        step = self.settings.page_step(self.viewport.height)
        current = self.cursor_wrapped_index()
        if current == 0:
            return False
        return self._move_rows(-min(step, current))

    def page_down(self) -> bool:
        step = self.settings.page_step(self.viewport.height)
        if self._move_rows(step):
            return True
        last = self.window.total_rows() - 1
        return self._move_rows(last - self.cursor_wrapped_index())

    def move_left(self) -> bool:
        line, column = self.cursor
        if column > 0:
            self.state.set_cursor(line, column - 1)
        elif line > 0:
            self.state.set_cursor(line - 1, len(self.document[line - 1]))
        else:
            return False
        self._follow()
        return True

    def move_right(self) -> bool:
        line, column = self.cursor
        if column < len(self.document[line]):
            self.state.set_cursor(line, column + 1)
        elif line < len(self.document) - 1:
            self.state.set_cursor(line + 1, 0)
        else:
            return False
        self._follow()
        return True

    def line_start(self) -> None:
        self.state.set_cursor(self.cursor[0], 0)
        self._follow()

    def line_end(self) -> None:
        line = self.cursor[0]
        self.state.set_cursor(line, len(self.document[line]))
        self._follow()

    def go_top(self) -> None:
        self.state.set_cursor(0, 0)
        self._follow()

    def go_bottom(self) -> None:
        last = len(self.document) - 1
        self.state.set_cursor(last, len(self.document[last]))
        self._follow()

    def _move_rows(self, rows: int) -> bool:
        if rows == 0:
            return False
        preferred = self.state.preferred_column
        if preferred is None:
            preferred = self.mapper.locate(*self.cursor).visual_column
        row = self.cursor_wrapped_index() + rows
        with self._operation("move_rows", rows=rows) as handle:
            target = self.mapper.cursor_at_wrapped_index(row, preferred)
            if target is None:
                handle.add_metadata("blocked", True)
                return False
            self.state.place_on_row(*target, row=row, preferred_column=preferred)
            self._follow()
        return True

    def _clamp_cursor(self) -> None:
        line, column = self.cursor
        line = min(max(line, 0), len(self.document) - 1)
        column = min(max(column, 0), len(self.document[line]))
        self.state.set_cursor(line, column)
        self._follow()

    def _follow(self) -> None:
        self.viewport.follow(self.cursor_wrapped_index())

    @contextmanager
    def _operation(self, label: str, **metadata: object) -> Iterator[telemetry.SpanHandle]:
        with telemetry.span(
            f"session::{label}",
            logger_name="softwrap.session",
            component="session",
            metadata={"session": self.name, **metadata},
        ) as handle:
            yield handle


__all__ = ["WrapSession"]
