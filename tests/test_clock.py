import itertools

from codedemos.clock import Clock


def _fake(*points):
    return iter(points).__next__


def test_start_and_stop_return_time_points():
    clock = Clock(now=_fake(100, 900))
    assert clock.start() == 100
    assert clock.stop() == 900


def test_elapsed_milliseconds_and_seconds():
    start = 7 * 1_000_000
    delta_ms = 2_500
    clock = Clock(now=_fake(start, start + delta_ms * 1_000_000))
    clock.start()
    clock.stop()
    assert clock.elapsed_milliseconds() == delta_ms
    assert clock.elapsed_seconds() == delta_ms // 1000


def test_elapsed_truncates_partial_units():
    clock = Clock(now=_fake(0, 999_999))
    clock.start()
    clock.stop()
    assert clock.elapsed_milliseconds() == 0
    assert clock.elapsed_seconds() == 0


def test_elapsed_before_use_is_zero():
    clock = Clock(now=_fake())
    assert clock.elapsed_seconds() == 0
    assert clock.elapsed_milliseconds() == 0


def test_get_time_does_not_stop():
    step = 3_000_000_000
    counter = itertools.count(0, step)
    clock = Clock(now=counter.__next__)
    clock.start()
    assert clock.get_time_seconds() == step // 1_000_000_000
    assert clock.get_time_milliseconds() == 2 * step // 1_000_000
    assert clock.get_time_microseconds() == 3 * step // 1_000
    # the clock was never stopped
    assert clock.elapsed_milliseconds() == 0


def test_get_time_without_start_counts_from_zero():
    clock = Clock(now=_fake(5_000_000))
    assert clock.get_time_milliseconds() == 5


def test_context_manager_starts_and_stops():
    with Clock(now=_fake(1_000_000, 4_000_000)) as clock:
        pass
    assert clock.elapsed_milliseconds() == 3


def test_real_clock_is_monotonic():
    clock = Clock()
    first = clock.start()
    second = clock.stop()
    assert second >= first
    assert clock.elapsed_milliseconds() >= 0