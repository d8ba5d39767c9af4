"""Exceptions raised by buffers and the views borrowed from them."""

from __future__ import annotations

from typing import Optional


class BufferValidationError(RuntimeError):
    """Raised when a slice range is out of bounds or splits a character."""

    def __init__(
        self,
        message: str,
        *,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class ReadOnlyBufferError(BufferValidationError):
    """Raised when something tries to mutate literal text."""


class InvalidatedViewError(RuntimeError):
    """Raised when a view is read after its buffer has been mutated."""

    def __init__(
        self, message: str, *, view_version: int, buffer_version: int
    ) -> None:
        super().__init__(message)
        self.view_version = view_version
        self.buffer_version = buffer_version


__all__ = [
    "BufferValidationError",
    "ReadOnlyBufferError",
    "InvalidatedViewError",
]
