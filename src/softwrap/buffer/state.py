"""Cursor state kept by the embedding editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (line, column)


@dataclass(slots=True)
class CursorState:
    """Document cursor plus what the last vertical move remembered.

    ``preferred_column`` is the in-row offset vertical moves aim for.
    ``display_row`` is the wrapped row the cursor was placed on; it
    disambiguates a column sitting exactly on a wrap boundary, which
    otherwise resolves to the end of the earlier row. Both are cleared by
    any other cursor change.
    """

    cursor: Cursor = (0, 0)
    preferred_column: Optional[int] = None
    display_row: Optional[int] = None

    def set_cursor(self, line: int, column: int) -> None:
        self.cursor = (line, column)
        self.preferred_column = None
        self.display_row = None

    def place_on_row(
        self, line: int, column: int, *, row: int, preferred_column: int
    ) -> None:
        self.cursor = (line, column)
        self.display_row = row
        self.preferred_column = preferred_column

    def forget_row(self) -> None:
        self.display_row = None
