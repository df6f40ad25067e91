"""Greedy word wrapping for a single source line."""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from .models import WrapSegment


def wrap_line(line: str, width: int) -> List[str]:
    """Break ``line`` into rows no wider than ``width``.

    Words are packed greedily, joined by a single space. A word wider than
    ``width`` is hard-broken into ``width``-sized chunks and its remainder
    keeps collecting words. Empty and whitespace-only lines come back as a
    single row, untouched.
    """

    if width < 1:
        raise ValueError("width must be positive")
    if len(line) <= width:
        return [line]

    words = line.split()
    if not words:
        return [line]

    rows: List[str] = []
    current = ""
    for word in words:
        if len(word) > width:
            if current:
                rows.append(current)
            while len(word) > width:
                rows.append(word[:width])
                word = word[width:]
            current = word
            continue

        candidate = f"{current} {word}" if current else word
        if len(candidate) <= width:
            current = candidate
        else:
            rows.append(current)
            current = word

    if current:
        rows.append(current)
    return rows or [""]


Wrapper = Callable[[str, int], Sequence[str]]


def segment_line(
    line: str, width: int, source_line: int, *, wrapper: Wrapper = wrap_line
) -> Tuple[WrapSegment, ...]:
    rows = list(wrapper(line, width)) or [""]
    last = len(rows) - 1
    return tuple(
        WrapSegment(text=text, source_line=source_line, is_last=i == last)
        for i, text in enumerate(rows)
    )


__all__ = ["Wrapper", "wrap_line", "segment_line"]
