from __future__ import annotations

from typing import List, Tuple

import pytest

from softwrap.wrap import wrap_line


class CountingWrapper:
    """Wrap function that records each (line, width) it was asked to wrap."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, int]] = []

    def __call__(self, line: str, width: int) -> List[str]:
        self.calls.append((line, width))
        return wrap_line(line, width)

    def reset(self) -> None:
        self.calls.clear()


@pytest.fixture
def counting_wrapper() -> CountingWrapper:
    return CountingWrapper()
