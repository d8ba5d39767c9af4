"""Owned, mutable UTF-8 text storage."""

from __future__ import annotations

from typing import Optional

from text_slices.runtime import telemetry

from .errors import ReadOnlyBufferError
from .owned import OwnedBuffer
from .validation import ensure_text_range
from .views import TextSlice


class TextBuffer(OwnedBuffer):
    """Growable text stored as UTF-8 bytes.

    Offsets everywhere are byte offsets, ``len()`` is the byte length. Every
    edit goes through ``mutation()`` so previously borrowed ``TextSlice``
    views go stale.
    """

    kind = "text"

    def __init__(
        self,
        data: bytes | bytearray = b"",
        *,
        name: str = "text",
        read_only: bool = False,
    ) -> None:
        super().__init__(name=name, read_only=read_only)
        self._data = bytearray(data)

    @classmethod
    def from_text(cls, text: str, *, name: str = "text") -> "TextBuffer":
        return cls(text.encode("utf-8"), name=name)

    @classmethod
    def literal(cls, text: str, *, name: str = "literal") -> "TextBuffer":
        """Read-only text that can be sliced but never edited."""

        return cls(text.encode("utf-8"), name=name, read_only=True)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return (
            f"TextBuffer(name={self.name!r}, version={self.version}, "
            f"text={self.text!r})"
        )

    @property
    def text(self) -> str:
        return self._data.decode("utf-8")

    def as_bytes(self) -> bytes:
        return bytes(self._data)

    def byte_range(self, start: int, end: int) -> bytes:
        return bytes(self._data[start:end])

    def is_empty(self) -> bool:
        return not self._data

    # -- borrowing ---------------------------------------------------------

    def slice(self, start: int = 0, end: Optional[int] = None) -> TextSlice:
        start, end = ensure_text_range(self._data, start, end)
        view = TextSlice(buffer=self, start=start, end=end, version=self.version)
        telemetry.view_event("slice_borrowed", view)
        return view

    def as_slice(self) -> TextSlice:
        return self.slice(0, len(self._data))

    # -- mutation ----------------------------------------------------------

    def push_str(self, text: str) -> None:
        with self.mutation("push_str"):
            self._data.extend(text.encode("utf-8"))

    def clear(self) -> None:
        with self.mutation("clear"):
            self._data.clear()

    def truncate(self, length: int) -> None:
        if self.read_only:
            raise ReadOnlyBufferError(f"text '{self.name}' is read-only")
        if length >= len(self._data):
            return
        ensure_text_range(self._data, 0, length)
        with self.mutation("truncate"):
            del self._data[length:]

    def replace_range(self, start: int, end: int, text: str) -> None:
        start, end = ensure_text_range(self._data, start, end)
        with self.mutation("replace_range"):
            self._data[start:end] = text.encode("utf-8")


__all__ = ["TextBuffer"]
