"""Small teaching demonstrations: a stopwatch, array traversal order, profiling targets, substitutable animals and additive Roman numerals."""

__version__ = "0.1.0"

__all__ = ["clock", "traversal", "series", "maps", "animals", "roman"]