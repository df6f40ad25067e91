"""Keep the cursor row inside the viewport."""

from __future__ import annotations

from dataclasses import dataclass


def clamp_offset(cursor_index: int, offset_y: int, visible_height: int) -> int:
    """Return the viewport top that keeps ``cursor_index`` on screen.

    Scrolls the minimum amount; an already visible cursor leaves
    ``offset_y`` unchanged, so applying the clamp twice is a no-op.
    """

    height = max(visible_height, 1)
    if cursor_index >= offset_y + height:
        return cursor_index - height + 1
    if cursor_index < offset_y:
        return cursor_index
    return offset_y


@dataclass(slots=True)
class Viewport:
    """Top wrapped row and height of the rendered region."""

    offset_y: int = 0
    height: int = 1

    def follow(self, cursor_index: int) -> int:
        self.offset_y = clamp_offset(cursor_index, self.offset_y, self.height)
        return self.offset_y

    def resize(self, height: int) -> None:
        self.height = max(height, 1)

    def contains(self, wrapped_index: int) -> bool:
        return self.offset_y <= wrapped_index < self.offset_y + self.height


__all__ = ["Viewport", "clamp_offset"]
