"""Validation helpers shared by the document and the wrap session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .state import Cursor

if TYPE_CHECKING:
    from .document import LineDocument


class BufferValidationError(RuntimeError):
    """Raised when a caller passes a cursor or line outside the document."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_line(document: "LineDocument", index: int, *, allow_end: bool = False) -> int:
    upper = len(document) if allow_end else len(document) - 1
    if index < 0 or index > upper:
        raise BufferValidationError("Line out of range", cursor=(index, 0))
    return index


def ensure_cursor(document: "LineDocument", cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= len(document):
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > len(document[row]):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor
