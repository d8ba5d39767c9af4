"""Validation helpers shared across buffers and views."""

from __future__ import annotations

from typing import Optional, Tuple

from .errors import BufferValidationError

Range = Tuple[int, int]  # (start, end), end exclusive


def ensure_range(length: int, start: int, end: Optional[int] = None) -> Range:
    if end is None:
        end = length
    if start < 0 or end < 0:
        raise BufferValidationError(
            "Negative offsets are not allowed", start=start, end=end
        )
    if start > end:
        raise BufferValidationError("Range start is past its end", start=start, end=end)
    if end > length:
        raise BufferValidationError(
            f"Range end {end} is out of bounds for length {length}",
            start=start,
            end=end,
        )
    return start, end


def is_char_boundary(data: bytes | bytearray, offset: int) -> bool:
    """True when ``offset`` does not land on a UTF-8 continuation byte."""

    if offset == 0 or offset == len(data):
        return True
    if offset < 0 or offset > len(data):
        return False
    return (data[offset] & 0xC0) != 0x80


def ensure_text_range(
    data: bytes | bytearray, start: int, end: Optional[int] = None
) -> Range:
    start, end = ensure_range(len(data), start, end)
    for offset in (start, end):
        if not is_char_boundary(data, offset):
            raise BufferValidationError(
                f"Byte offset {offset} is not a char boundary",
                start=start,
                end=end,
            )
    return start, end
