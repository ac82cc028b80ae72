"""Compare summing a two-dimensional array row by row and column by column."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from codedemos.clock import Clock

ROWS = 1_000_000
COLS = 1_000


def make_array(rows: int, cols: int) -> list[list[int]]:
    """Return a ``rows`` x ``cols`` array of zeros with independent rows."""
    if rows < 0 or cols < 0:
        raise ValueError("array dimensions must not be negative")
    return [[0] * cols for _ in range(rows)]


def sum_rows_first(array: Sequence[Sequence[int]]) -> int:
    """Sum every element, visiting each row in turn."""
    return sum(sum(row) for row in array)


def sum_columns_first(array: Sequence[Sequence[int]]) -> int:
    """Sum every element, visiting each column in turn."""
    return sum(sum(column) for column in zip(*array))


def _dimension(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Time row-first and column-first traversal of an array."
    )
    parser.add_argument("--rows", type=_dimension, default=ROWS)
    parser.add_argument("--cols", type=_dimension, default=COLS)
    args = parser.parse_args(argv)

    array = make_array(args.rows, args.cols)
    clock = Clock()

    clock.start()
    total = sum_rows_first(array)
    clock.stop()
    print(f"sum: {total}")
    print(f"Rows first: t = {clock.elapsed_milliseconds()} ms")

    clock.start()
    total = sum_columns_first(array)
    clock.stop()
    elapsed = clock.elapsed_milliseconds()
    print(f"sum: {total}")
    print(f"Columns first: t = {elapsed} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())