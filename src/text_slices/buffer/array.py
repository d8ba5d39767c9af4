"""Owned list storage, sliced the same way as text."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .owned import OwnedBuffer
from .validation import ensure_range
from .views import ArraySlice


class ArrayBuffer(OwnedBuffer):
    kind = "array"

    def __init__(self, items: Iterable[Any] = (), *, name: str = "array") -> None:
        super().__init__(name=name)
        self._items: List[Any] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return (
            f"ArrayBuffer(name={self.name!r}, version={self.version}, "
            f"items={self._items!r})"
        )

    def to_list(self) -> List[Any]:
        return list(self._items)

    def item_range(self, start: int, end: int) -> List[Any]:
        return self._items[start:end]

    def slice(self, start: int = 0, end: Optional[int] = None) -> ArraySlice:
        start, end = ensure_range(len(self._items), start, end)
        return ArraySlice(buffer=self, start=start, end=end, version=self.version)

    def push(self, item: Any) -> None:
        with self.mutation("push"):
            self._items.append(item)

    def set(self, index: int, item: Any) -> None:
        if not -len(self._items) <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for length {len(self._items)}"
            )
        with self.mutation("set"):
            self._items[index] = item

    def clear(self) -> None:
        with self.mutation("clear"):
            self._items.clear()


__all__ = ["ArrayBuffer"]
