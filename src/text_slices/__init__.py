"""Owned text buffers, borrowed slices, and first-word lookup."""

__all__ = [
    "buffer",
    "demo",
    "runtime",
    "words",
]

__version__ = "0.1.0"
