"""Mutable list-of-lines document with point edits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple, overload

from .state import Cursor
from .validation import ensure_cursor, ensure_line


@dataclass(frozen=True, slots=True)
class LineDelta:
    """Which cached wrap results an edit made stale.

    ``shifted`` is true when lines were inserted or removed at or after
    ``start``, so every later line index now names a different line.
    """

    start: int
    shifted: bool = False


@dataclass(slots=True)
class LineDocument(Sequence[str]):
    """Ordered source lines, edited in place.

    The document always holds at least one (possibly empty) line. Wrap
    caches keep a reference to it and read lines by index, so every edit
    reports a ``LineDelta`` the owner must forward to the cache.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines.append("")

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        return cls(_lines=text.split("\n"))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineDocument":
        return cls(_lines=list(lines))

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[str]: ...

    def __getitem__(self, index):
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def set_line(self, index: int, text: str) -> LineDelta:
        ensure_line(self, index)
        if "\n" in text:
            raise ValueError("set_line expects a single line; use insert_text")
        self._lines[index] = text
        self._touch()
        return LineDelta(index)

    def insert_text(self, cursor: Cursor, text: str) -> Tuple[LineDelta, Cursor]:
        """Insert ``text`` at ``cursor``; returns the delta and the cursor after it."""

        row, col = ensure_cursor(self, cursor)
        line = self._lines[row]
        before, after = line[:col], line[col:]
        pieces = text.split("\n")
        if len(pieces) == 1:
            self._lines[row] = before + text + after
            self._touch()
            return LineDelta(row), (row, col + len(text))

        middle = pieces[1:-1]
        last = pieces[-1]
        self._lines[row : row + 1] = [before + pieces[0], *middle, last + after]
        self._touch()
        return LineDelta(row, shifted=True), (row + len(pieces) - 1, len(last))

    def delete_text(self, cursor: Cursor, count: int = 1) -> LineDelta:
        """Remove up to ``count`` characters after ``cursor`` within its line."""

        row, col = ensure_cursor(self, cursor)
        line = self._lines[row]
        end = min(col + max(count, 0), len(line))
        if end == col:
            return LineDelta(row)
        self._lines[row] = line[:col] + line[end:]
        self._touch()
        return LineDelta(row)

    def split_line(self, cursor: Cursor) -> LineDelta:
        delta, _ = self.insert_text(cursor, "\n")
        return delta

    def join_with_next(self, index: int) -> LineDelta:
        ensure_line(self, index)
        if index == len(self._lines) - 1:
            return LineDelta(index)
        self._lines[index : index + 2] = [self._lines[index] + self._lines[index + 1]]
        self._touch()
        return LineDelta(index, shifted=True)

    def insert_lines(self, index: int, lines: Iterable[str]) -> LineDelta:
        ensure_line(self, index, allow_end=True)
        new_lines = list(lines)
        self._lines[index:index] = new_lines
        if new_lines:
            self._touch()
        return LineDelta(index, shifted=bool(new_lines))

    def delete_lines(self, start: int, end: int) -> LineDelta:
        """Remove lines ``[start, end)``; an emptied document keeps one blank line."""

        ensure_line(self, start)
        end = min(max(end, start), len(self._lines))
        if end == start:
            return LineDelta(start)
        del self._lines[start:end]
        if not self._lines:
            self._lines.append("")
        self._touch()
        return LineDelta(start, shifted=True)

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


__all__ = ["LineDocument", "LineDelta"]
