"""A stack with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when taking from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]