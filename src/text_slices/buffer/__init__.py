"""Owned buffers and the versioned views borrowed from them."""

from .array import ArrayBuffer
from .errors import BufferValidationError, InvalidatedViewError, ReadOnlyBufferError
from .owned import Mutation, OwnedBuffer
from .text import TextBuffer
from .validation import ensure_range, ensure_text_range, is_char_boundary
from .views import ArraySlice, BufferView, TextSlice

__all__ = [
    "OwnedBuffer",
    "Mutation",
    "TextBuffer",
    "ArrayBuffer",
    "BufferView",
    "TextSlice",
    "ArraySlice",
    "BufferValidationError",
    "ReadOnlyBufferError",
    "InvalidatedViewError",
    "ensure_range",
    "ensure_text_range",
    "is_char_boundary",
]
