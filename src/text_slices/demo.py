"""Console walkthrough of slices and what happens to them on mutation."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from text_slices.buffer import ArrayBuffer, InvalidatedViewError, TextBuffer
from text_slices.runtime import telemetry
from text_slices.words import first_word, first_word_slice

GREETING = "Hello, World!"

Printer = Callable[[str], None]


def index_goes_out_of_sync(out: Printer) -> None:
    """A bare index survives ``clear()`` even though it no longer means anything."""

    s = TextBuffer.from_text(GREETING, name="s")
    word = first_word(s)
    out(str(word))
    s.clear()
    out(str(word))


def manual_and_first_word_slices(out: Printer) -> None:
    s = TextBuffer.from_text(GREETING, name="s")
    hello = s.slice(0, 5)
    world = s.slice(7, 12)
    out(f"{hello} {world}")
    out(str(first_word_slice(s)))


def stale_slice_is_rejected(out: Printer) -> None:
    s = TextBuffer.from_text(GREETING, name="s")
    word = first_word_slice(s)
    out(str(word))

    s.clear()
    try:
        out(str(word))
    except InvalidatedViewError as exc:
        out(f"stale view rejected: {exc}")


def literals_and_arrays(out: Printer) -> None:
    s = TextBuffer.literal(GREETING, name="s")
    out(str(s.as_slice()))

    a = ArrayBuffer([1, 2, 3, 4, 5], name="a")
    slice_of_a = a.slice(1, 3)
    out(str(slice_of_a))


SECTIONS = (
    index_goes_out_of_sync,
    manual_and_first_word_slices,
    stale_slice_is_rejected,
    literals_and_arrays,
)


def run_demo(out: Printer = print) -> None:
    out(GREETING)
    for section in SECTIONS:
        with telemetry.span(name=f"demo::{section.__name__}"):
            section(out)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="text-slices",
        description="Print a walkthrough of text and array slices.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    _parse_args(argv)
    run_demo()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual demo
    raise SystemExit(main())
