"""First-word lookup over raw UTF-8 bytes."""

from __future__ import annotations

from typing import Union

from text_slices.buffer import TextBuffer, TextSlice

SPACE = ord(" ")

TextLike = Union[str, TextBuffer, TextSlice]


def _as_bytes(text: TextLike) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return text.as_bytes()


def first_word(text: TextLike) -> int:
    """Byte offset of the first space in ``text``, or its byte length.

    The result is a plain integer: it stays the same after the buffer it came
    from is edited, whether or not it still means anything.
    """

    data = _as_bytes(text)
    for index, item in enumerate(data):
        if item == SPACE:
            return index
    return len(data)


def first_word_slice(text: TextLike) -> TextSlice:
    """Borrow everything before the first space, or all of ``text``.

    A ``str`` argument is treated as literal text and can never go stale.
    """

    if isinstance(text, str):
        text = TextBuffer.literal(text)
    data = text.as_bytes()
    for index, item in enumerate(data):
        if item == SPACE:
            return text.slice(0, index)
    return text.slice(0, len(data))


__all__ = ["SPACE", "TextLike", "first_word", "first_word_slice"]
