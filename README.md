# codedemos

A handful of small, self-contained programs for programming classes. Each
demonstration is a plain module you can import, and most are also a command
you can run.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

Each command prints its results to standard output.

| Command               | What it does | Options |
|-----------------------|--------------|---------|
| `codedemos-traversal` | Builds an array of zeros, sums it row by row and then column by column, and prints each sum with the time taken in milliseconds. | `--rows` (default 1000000), `--cols` (default 1000) |
| `codedemos-series`    | Computes `1 + 2 + … + n` both by formula and by a loop, many times over, and prints both results — a target for a profiler. | `--repeat` (default 1000000), `--n` (default 1000) |
| `codedemos-maps`      | Inserts the keys `0 … count-1` into a hash map and an ordered map and prints the size of each. | `--count` (default 1000000) |
| `codedemos-animals`   | Lets a dog, a cat, a pig and a sparrow speak, one sound per line. | `--lang` (`en` or `pl`, default `en`), `--dispatch` (`virtual` or `type`, default `virtual`) |

The defaults of `codedemos-traversal` build a very large array; pass smaller
`--rows` and `--cols` to try it on a modest machine.

## Library use

### Timing — `codedemos.clock`

```python
from codedemos.clock import Clock

clock = Clock()
clock.start()
...                           # work to be measured
clock.stop()
print(clock.elapsed_milliseconds())
```

`start()` and `stop()` return the time point they recorded, in nanoseconds.
`elapsed_seconds()` and `elapsed_milliseconds()` give whole units between the
last start and stop; `get_time_seconds()`, `get_time_milliseconds()` and
`get_time_microseconds()` read the time since `start()` without stopping the
clock. A `Clock` is also a context manager that starts on entry and stops on
exit, and takes an optional `now` callable returning nanoseconds (by default
`time.perf_counter_ns`).

### Traversal order — `codedemos.traversal`

```python
from codedemos.traversal import make_array, sum_rows_first, sum_columns_first

array = make_array(1000, 100)
assert sum_rows_first(array) == sum_columns_first(array)
```

`make_array` raises `ValueError` for negative dimensions.

### Arithmetic series — `codedemos.series`

```python
from codedemos.series import closed_form, iterative

closed_form(1000)   # 500500
iterative(1000)     # 500500
```

### Hash map versus ordered map — `codedemos.maps`

`fill_maps(count)` increments the keys `0 … count-1` in a `dict` and in a
`sortedcontainers.SortedDict` and returns both as a pair.

### Substitutable hierarchies — `codedemos.animals`

`Animal` is the common base; `Dog`, `Cat`, `Pig` and `Sparrow` each know how
to `speak()`, which prints the animal's sound and returns it. Each animal
takes a `Language` (`Language.EN` or `Language.PL`) that picks its sound, and
`breathe()` counts breaths taken. Two ways to make an animal sound are
provided side by side:

* `voice(animal)` simply calls `animal.speak()` — any new animal works
  without changing it;
* `voice_by_type(animal)` inspects the concrete type and calls the matching
  method (`bark`, `meow`, `oink`, `tweet`) — every new animal means editing
  this function, and an unknown kind stays silent.

### Roman numerals — `codedemos.roman`

```python
from codedemos.roman import to_roman

to_roman(2025)   # 'MMXXV'
to_roman(4)      # 'IIII'
to_roman(1990)   # 'MDCCCCLXXXX'
```

`to_roman` writes each symbol from `M` down to `I` as many times as it fits.

## What the package does not do

* `to_roman` uses purely additive notation: it never writes subtractive pairs
  such as `IV`, `IX`, `XC` or `CM`. Zero and negative numbers give an empty
  string.
* There is no conversion from Roman numerals back to numbers, and no command
  for Roman numerals.