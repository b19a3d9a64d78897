"""Sorting helpers for integer lists."""

from collections.abc import Sequence


def sort_values(values: Sequence[int]) -> list[int]:
    """Return a new ascending copy of ``values``.

    The input is never mutated. Ties between equal integers are
    indistinguishable, so stability is irrelevant here.

    Example:
        >>> sort_values([8, 4, 3, 0])
        [0, 3, 4, 8]
    """
    return sorted(values)


def is_sorted(values: Sequence[int]) -> bool:
    """Check whether ``values`` is in ascending order."""
    return all(a <= b for a, b in zip(values, values[1:]))
