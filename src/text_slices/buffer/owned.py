"""Versioned ownership shared by every buffer type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from text_slices.runtime import telemetry

from .errors import ReadOnlyBufferError


class OwnedBuffer(ABC):
    """Owns its storage and counts mutations.

    ``version`` starts at 0 and goes up by one for every committed
    mutation. Views capture it when borrowed and compare before each read.
    """

    kind: str = "buffer"

    def __init__(self, *, name: str, read_only: bool = False) -> None:
        self.name = name
        self.read_only = read_only
        self.version = 0

    def mutation(self, label: str) -> "Mutation":
        return Mutation(self, label)

    @abstractmethod
    def __len__(self) -> int:
        """Size in the unit offsets are measured in."""


class Mutation(AbstractContextManager["Mutation"]):
    """Wraps one in-place edit; bumps the owner's version on clean exit."""

    def __init__(self, buffer: OwnedBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._version_before = buffer.version

    def __enter__(self) -> "Mutation":
        if self.buffer.read_only:
            raise ReadOnlyBufferError(
                f"{self.buffer.kind} '{self.buffer.name}' is read-only"
            )
        self._version_before = self.buffer.version
        self._span_cm = telemetry.span(
            f"{self.buffer.kind}::{self.label}", buffer=self.buffer
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer.version = self._version_before + 1
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["OwnedBuffer", "Mutation"]
