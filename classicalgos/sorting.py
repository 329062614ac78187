"""Comparison sorts and a timing table for heap sort."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

_DEFAULT_SIZES = range(2500, 50001, 2500)
_RAND_LIMIT = 2**31


def bubble_sort_counted(items: Iterable[T]) -> tuple[list[T], int]:
    """Bubble sort ``items`` and return the sorted list and the comparison count."""
    result = list(items)
    comparisons = 0
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            comparisons += 1
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result, comparisons


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with ``items`` in ascending order, using bubble sort."""
    return bubble_sort_counted(items)[0]


def _sift_down(heap: list[T], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with ``items`` in ascending order, using a max-heap."""
    heap = list(items)
    n = len(heap)
    for root in reversed(range(n // 2)):
        _sift_down(heap, n, root)
    for end in reversed(range(n)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def _merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with ``items`` in ascending order; the sort is stable."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def timing_table(
    sizes: Iterable[int] = _DEFAULT_SIZES, seed: int | None = None
) -> list[tuple[int, int, float]]:
    """Time heap sort on random arrays of each size.

    Returns rows of ``(row_number, size, seconds)``, numbered from 1.
    """
    rng = random.Random(seed)
    rows = []
    for number, size in enumerate(sizes, start=1):
        data = [rng.randrange(_RAND_LIMIT) for _ in range(size)]
        start = time.perf_counter()
        heap_sort(data)
        elapsed = time.perf_counter() - start
        rows.append((number, size, elapsed))
    return rows