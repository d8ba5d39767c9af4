from __future__ import annotations

import pytest

from text_slices.buffer import (
    BufferValidationError,
    InvalidatedViewError,
    OwnedBuffer,
    ReadOnlyBufferError,
    TextBuffer,
    is_char_boundary,
)


def test_manual_slices_read_expected_text() -> None:
    buffer = TextBuffer.from_text("Hello, World!")

    hello = buffer.slice(0, 5)
    world = buffer.slice(7, 12)

    assert f"{hello} {world}" == "Hello World"
    assert len(hello) == 5
    assert world.as_bytes() == b"World"


def test_every_mutation_bumps_version() -> None:
    buffer = TextBuffer.from_text("abc")

    buffer.push_str("def")
    buffer.replace_range(0, 1, "A")
    buffer.truncate(4)
    buffer.clear()

    assert buffer.version == 4
    assert buffer.text == ""


def test_truncate_past_end_is_a_noop() -> None:
    buffer = TextBuffer.from_text("abc")
    view = buffer.as_slice()

    buffer.truncate(10)

    assert buffer.version == 0
    assert view == "abc"


def test_view_survives_reads_but_not_writes() -> None:
    buffer = TextBuffer.from_text("Hello, World!")
    view = buffer.slice(0, 5)

    assert buffer.text == "Hello, World!"
    assert view == "Hello"

    buffer.replace_range(0, 5, "Howdy")

    with pytest.raises(InvalidatedViewError):
        str(view)
    with pytest.raises(InvalidatedViewError):
        len(view)
    assert buffer.slice(0, 5) == "Howdy"


def test_stale_view_repr_does_not_raise() -> None:
    buffer = TextBuffer.from_text("abc", name="s")
    view = buffer.slice(0, 2)
    buffer.clear()

    assert "stale" in repr(view)
    assert "'s'" in repr(view)


def test_reborrow_keeps_parent_version() -> None:
    buffer = TextBuffer.from_text("Hello, World!")
    tail = buffer.slice(7)

    world = tail.slice(0, 5)

    assert world == "World"
    assert world.version == tail.version == 0
    buffer.push_str("?")
    assert not world.is_valid()


@pytest.mark.parametrize(
    ("start", "end"),
    [(-1, 2), (3, 2), (0, 14)],
)
def test_out_of_range_slices_are_rejected(start: int, end: int) -> None:
    buffer = TextBuffer.from_text("Hello, World!")

    with pytest.raises(BufferValidationError) as excinfo:
        buffer.slice(start, end)
    assert (excinfo.value.start, excinfo.value.end) == (start, end)


def test_slice_inside_multibyte_character_is_rejected() -> None:
    buffer = TextBuffer.from_text("héllo")

    assert not is_char_boundary(buffer.as_bytes(), 2)
    with pytest.raises(BufferValidationError):
        buffer.slice(0, 2)
    with pytest.raises(BufferValidationError):
        buffer.as_slice().slice(2)
    assert buffer.slice(0, 3) == "hé"


def test_literal_refuses_mutation() -> None:
    literal = TextBuffer.literal("Hello, World!")
    view = literal.as_slice()

    with pytest.raises(ReadOnlyBufferError):
        literal.clear()
    with pytest.raises(ReadOnlyBufferError):
        literal.push_str("!")

    assert literal.version == 0
    assert view == "Hello, World!"


def test_view_equality() -> None:
    buffer = TextBuffer.from_text("abab")

    assert buffer.slice(0, 2) == buffer.slice(2, 4)
    assert buffer.slice(0, 2) == b"ab"
    assert buffer.slice(0, 2) != "ba"


def test_literal_refuses_noop_truncate() -> None:
    literal = TextBuffer.literal("abc")

    with pytest.raises(ReadOnlyBufferError):
        literal.truncate(5)
    assert literal.version == 0


def test_storage_is_only_reachable_through_mutations() -> None:
    buffer = TextBuffer.from_text("Hello, World!")
    word = buffer.slice(0, 6)

    assert not hasattr(buffer, "raw")
    data = buffer.as_bytes()
    assert isinstance(data, bytes)
    assert word == "Hello,"
    assert word.is_valid()


def test_owned_buffer_requires_len() -> None:
    with pytest.raises(TypeError):
        OwnedBuffer(name="bare")  # type: ignore[abstract]
