"""Classic comparison and distribution sorts; each returns a new sorted list."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix."""
    items = list(values)
    for j in range(1, len(items)):
        key = items[j]
        i = j - 1
        while i >= 0 and items[i] > key:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = key
    return items


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    i = low + 1
    for j in range(low + 1, high + 1):
        if items[j] < pivot:
            items[i], items[j] = items[j], items[i]
            i += 1
    items[i - 1], items[low] = items[low], items[i - 1]
    return i - 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort using the first element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort in base 10; negatives are supported."""
    items = list(values)
    if not items:
        return []
    offset = min(items)
    shifted = [v - offset for v in items]
    largest = max(shifted)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for v in shifted:
            buckets[(v // place) % 10].append(v)
        shifted = [v for bucket in buckets for v in bucket]
        place *= 10
    return [v + offset for v in shifted]


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly moving the smallest remaining element forward."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order elements."""
    items = list(values)
    length = len(items)
    for i in range(length - 1):
        for j in range(length - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def counting_sort(text: str) -> str:
    """Return the characters of ``text`` in code-point order."""
    counts = Counter(text)
    return "".join(ch * counts[ch] for ch in sorted(counts))


def _sift_down(items: list[int], size: int, index: int) -> None:
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        largest = index
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort with an in-place binary max-heap."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return list(heapq.merge(merge_sort(items[:middle]), merge_sort(items[middle:])))