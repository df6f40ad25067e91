"""Layout settings shared by the wrap session and its callers."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

ENV_PREFIX = "SOFTWRAP_"


def _env_int(environ: Mapping[str, str], key: str, fallback: int) -> int:
    raw = environ.get(f"{ENV_PREFIX}{key}")
    if raw is None or not raw.strip():
        return fallback
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(
            f"{ENV_PREFIX}{key} must be an integer, got {raw!r}"
        ) from exc


@dataclass(frozen=True, slots=True)
class WrapSettings:
    """Display geometry knobs.

    ``min_width`` is the floor applied to the wrap width so narrow terminals
    never produce degenerate one-character rows. ``margin`` is subtracted from
    the display width and ``status_rows`` from the display height.
    """

    min_width: int = 20
    margin: int = 2
    status_rows: int = 2
    page_overlap: int = 2
    tab_width: int = 4

    def __post_init__(self) -> None:
        if self.min_width < 1:
            raise ValueError("min_width must be positive")
        for name in ("margin", "status_rows", "page_overlap"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.tab_width < 1:
            raise ValueError("tab_width must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WrapSettings":
        """Build settings from ``SOFTWRAP_*`` variables, e.g. ``SOFTWRAP_MIN_WIDTH``."""

        env = os.environ if environ is None else environ
        defaults = cls()
        values = {
            f.name: _env_int(env, f.name.upper(), getattr(defaults, f.name))
            for f in fields(cls)
        }
        return cls(**values)

    def wrap_width_for(self, display_width: int) -> int:
        return max(display_width - self.margin, self.min_width)

    def visible_height_for(self, display_height: int) -> int:
        return max(display_height - self.status_rows, 1)

    def page_step(self, visible_height: int) -> int:
        return max(visible_height - self.page_overlap, 1)


__all__ = ["WrapSettings"]
