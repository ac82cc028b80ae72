"""A stopwatch built on a monotonic nanosecond time source."""

from __future__ import annotations

import time
from typing import Callable

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def _truncate(nanoseconds: int, unit: int) -> int:
    """Convert nanoseconds to whole units, truncating toward zero."""
    whole = abs(nanoseconds) // unit
    return whole if nanoseconds >= 0 else -whole


class Clock:
    """Stopwatch that measures time between ``start`` and ``stop``.

    Time points are integers in nanoseconds taken from ``now``, which
    defaults to a monotonic high-resolution counter. Both time points
    start at zero until the clock is started and stopped.
    """

    def __init__(self, now: Callable[[], int] = time.perf_counter_ns) -> None:
        self._now = now
        self._start = 0
        self._stop = 0

    def start(self) -> int:
        """Start the clock and return the start time point."""
        self._start = self._now()
        return self._start

    def stop(self) -> int:
        """Stop the clock and return the stop time point."""
        self._stop = self._now()
        return self._stop

    def elapsed_seconds(self) -> int:
        """Whole seconds between the last start and stop."""
        return _truncate(self._stop - self._start, _NS_PER_S)

    def elapsed_milliseconds(self) -> int:
        """Whole milliseconds between the last start and stop."""
        return _truncate(self._stop - self._start, _NS_PER_MS)

    def get_time_seconds(self) -> int:
        """Whole seconds since the last start, without stopping the clock."""
        return _truncate(self._now() - self._start, _NS_PER_S)

    def get_time_milliseconds(self) -> int:
        """Whole milliseconds since the last start, without stopping the clock."""
        return _truncate(self._now() - self._start, _NS_PER_MS)

    def get_time_microseconds(self) -> int:
        """Whole microseconds since the last start, without stopping the clock."""
        return _truncate(self._now() - self._start, _NS_PER_US)

    def __enter__(self) -> Clock:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()