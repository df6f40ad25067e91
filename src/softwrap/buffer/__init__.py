"""Line document, cursor state and validation for wrap sessions."""

from .document import LineDelta, LineDocument
from .state import Cursor, CursorState
from .validation import BufferValidationError, ensure_cursor, ensure_line

__all__ = [
    "LineDocument",
    "LineDelta",
    "Cursor",
    "CursorState",
    "BufferValidationError",
    "ensure_cursor",
    "ensure_line",
]
