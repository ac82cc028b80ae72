"""Write whole numbers as additive Roman numerals."""

from __future__ import annotations

_SYMBOLS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (500, "D"),
    (100, "C"),
    (50, "L"),
    (10, "X"),
    (5, "V"),
    (1, "I"),
)


def to_roman(n: int) -> str:
    """Return ``n`` as a Roman numeral built from repeated symbols.

    Symbols are emitted from the largest to the smallest, each repeated as
    often as it fits. No subtractive pairs are used, so 4 becomes ``IIII``.
    Zero and negative numbers give an empty string.
    """
    parts: list[str] = []
    remaining = max(n, 0)
    for value, symbol in _SYMBOLS:
        count, remaining = divmod(remaining, value)
        parts.append(symbol * count)
    return "".join(parts)