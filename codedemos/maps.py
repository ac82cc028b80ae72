"""Fill a hash map and an ordered map with the same keys."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Sequence

from sortedcontainers import SortedDict

COUNT = 1_000_000


def fill_maps(count: int) -> tuple[dict[int, int], SortedDict]:
    """Increment keys ``0 .. count-1`` in a hash map and an ordered map."""
    hash_map: defaultdict[int, int] = defaultdict(int)
    ordered = SortedDict()
    for key in range(count):
        hash_map[key] += 1
        ordered[key] = ordered.get(key, 0) + 1
    return dict(hash_map), ordered


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Insert keys into a hash map and an ordered map."
    )
    parser.add_argument("--count", type=int, default=COUNT)
    args = parser.parse_args(argv)

    hash_map, ordered = fill_maps(args.count)
    print(len(hash_map))
    print(len(ordered))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())