"""Array algorithms: Dutch-flag sorting, consecutive runs, de-duplication and search."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

_ALLOWED_012 = frozenset({0, 1, 2})


def sort_012(values: Iterable[int]) -> list[int]:
    """Return the values, which must all be 0, 1 or 2, in ascending order."""
    counts = Counter(values)
    unexpected = set(counts) - _ALLOWED_012
    if unexpected:
        raise ValueError(f"only 0, 1 and 2 are allowed, got {sorted(unexpected)}")
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def longest_consecutive_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers, in any order."""
    present = set(values)
    best = 0
    for start in present:
        if start - 1 in present:
            continue
        length = 1
        while start + length in present:
            length += 1
        best = max(best, length)
    return best


def remove_sorted_duplicates(values: Iterable[int]) -> list[int]:
    """Return the sorted values with adjacent duplicates dropped."""
    return [key for key, _ in groupby(values)]


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the sorted ``values``, or None if absent."""
    first, last = 0, len(values) - 1
    while first <= last:
        middle = (first + last) // 2
        if values[middle] < target:
            first = middle + 1
        elif values[middle] == target:
            return middle
        else:
            last = middle - 1
    return None