"""Sum of an arithmetic series, by formula and by iteration."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

REPEATS = 1_000_000
TERMS = 1000


def closed_form(n: int) -> int:
    """Return 1 + 2 + ... + n by the closed formula."""
    return n * (n + 1) // 2


def iterative(n: int) -> int:
    """Return 1 + 2 + ... + n by adding the terms one by one."""
    result = 0
    for term in range(1, n + 1):
        result += term
    return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Repeatedly compute a series sum both ways."
    )
    parser.add_argument("--repeat", type=int, default=REPEATS)
    parser.add_argument("--n", type=int, default=TERMS)
    args = parser.parse_args(argv)

    series_c = 0
    series_i = 0
    for _ in range(args.repeat):
        series_c = closed_form(args.n)
        series_i = iterative(args.n)
    print(series_c)
    print(series_i)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())