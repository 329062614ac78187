"""Linear search and maximum of a sequence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def linear_search(items: Iterable[T], target: T) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return None


def largest(items: Iterable[T]) -> T:
    """Return the largest element; raise ValueError when there is none."""
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("largest() of an empty sequence") from None
    for item in iterator:
        if item > best:
            best = item
    return best