"""Borrowed, non-owning views into buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from text_slices.runtime import telemetry

from .errors import InvalidatedViewError
from .owned import OwnedBuffer
from .validation import ensure_range, ensure_text_range

if TYPE_CHECKING:  # pragma: no cover
    from .array import ArrayBuffer
    from .text import TextBuffer


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class BufferView:
    """``[start, end)`` of ``buffer`` as it was at ``version``."""

    buffer: OwnedBuffer
    start: int
    end: int
    version: int

    def is_valid(self) -> bool:
        return self.buffer.version == self.version

    def check(self) -> None:
        """Raise ``InvalidatedViewError`` if the buffer changed since borrowing."""

        if self.is_valid():
            return
        telemetry.view_event("view_invalidated", self, level="info")
        raise InvalidatedViewError(
            f"view of {self.buffer.kind} '{self.buffer.name}' was borrowed at "
            f"version {self.version} but the buffer is now at version "
            f"{self.buffer.version}",
            view_version=self.version,
            buffer_version=self.buffer.version,
        )

    def __len__(self) -> int:
        self.check()
        return self.end - self.start

    def __repr__(self) -> str:
        state = "valid" if self.is_valid() else "stale"
        return (
            f"{type(self).__name__}(buffer={self.buffer.name!r}, start={self.start}, "
            f"end={self.end}, version={self.version}, {state})"
        )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class TextSlice(BufferView):
    """Borrowed UTF-8 byte range of a ``TextBuffer``."""

    buffer: "TextBuffer"

    def as_bytes(self) -> bytes:
        self.check()
        return self.buffer.byte_range(self.start, self.end)

    def as_str(self) -> str:
        return self.as_bytes().decode("utf-8")

    def slice(self, start: int = 0, end: Optional[int] = None) -> "TextSlice":
        """Re-borrow ``[start, end)`` relative to this view."""

        self.check()
        start, end = ensure_range(self.end - self.start, start, end)
        ensure_text_range(self.buffer.as_bytes(), self.start + start, self.start + end)
        return TextSlice(
            buffer=self.buffer,
            start=self.start + start,
            end=self.start + end,
            version=self.version,
        )

    def __str__(self) -> str:
        return self.as_str()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.as_str() == other
        if isinstance(other, (bytes, bytearray)):
            return self.as_bytes() == bytes(other)
        if isinstance(other, TextSlice):
            return self.as_bytes() == other.as_bytes()
        return NotImplemented


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ArraySlice(BufferView):
    """Borrowed item range of an ``ArrayBuffer``."""

    buffer: "ArrayBuffer"

    def to_list(self) -> List[Any]:
        self.check()
        return self.buffer.item_range(self.start, self.end)

    def slice(self, start: int = 0, end: Optional[int] = None) -> "ArraySlice":
        self.check()
        start, end = ensure_range(self.end - self.start, start, end)
        return ArraySlice(
            buffer=self.buffer,
            start=self.start + start,
            end=self.start + end,
            version=self.version,
        )

    def __getitem__(self, index: int) -> Any:
        items = self.to_list()
        return items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        if isinstance(other, ArraySlice):
            return self.to_list() == other.to_list()
        return NotImplemented

    def __str__(self) -> str:
        return str(self.to_list())


__all__ = ["BufferView", "TextSlice", "ArraySlice"]
