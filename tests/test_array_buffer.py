from __future__ import annotations

import pytest

from text_slices.buffer import ArrayBuffer, BufferValidationError, InvalidatedViewError


def test_array_slice_reads_items() -> None:
    a = ArrayBuffer([1, 2, 3, 4, 5])

    slice_of_a = a.slice(1, 3)

    assert slice_of_a == [2, 3]
    assert list(slice_of_a) == [2, 3]
    assert slice_of_a[0] == 2
    assert str(slice_of_a) == "[2, 3]"
    assert slice_of_a.slice(1) == [3]


def test_array_slice_goes_stale_on_mutation() -> None:
    a = ArrayBuffer([1, 2, 3, 4, 5])
    view = a.slice(1, 3)

    a.set(1, 20)

    with pytest.raises(InvalidatedViewError):
        view.to_list()
    assert a.slice(1, 3) == [20, 3]


def test_array_push_and_clear() -> None:
    a = ArrayBuffer()

    a.push("x")
    a.push("y")
    a.clear()

    assert a.version == 3
    assert len(a) == 0


def test_array_rejects_bad_ranges_and_indices() -> None:
    a = ArrayBuffer([1, 2])

    with pytest.raises(BufferValidationError):
        a.slice(1, 3)
    with pytest.raises(IndexError):
        a.set(2, 0)
    assert a.version == 0
