"""Incremental word-wrap cache and document/display coordinate mapper."""

__all__ = [
    "buffer",
    "runtime",
    "view",
    "wrap",
]

__version__ = "0.1.0"
