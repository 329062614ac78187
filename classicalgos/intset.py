"""A set of integers that keeps the order in which members were added."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class OrderedIntSet:
    """Unique members in insertion order, with union, intersection, difference."""

    def __init__(self, members: Iterable[int] = ()) -> None:
        self._members: dict[int, None] = dict.fromkeys(members)

    def __iter__(self) -> Iterator[int]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member: object) -> bool:
        return member in self._members

    def __repr__(self) -> str:
        return f"OrderedIntSet({list(self._members)!r})"

    def __str__(self) -> str:
        return " ".join(str(member) for member in self._members)

    def add(self, member: int) -> None:
        """Add ``member`` unless it is already present."""
        self._members.setdefault(member, None)

    def is_empty(self) -> bool:
        """Report whether the set has no members."""
        return not self._members

    def union(self, other: Iterable[int]) -> OrderedIntSet:
        """Members of this set, then those of ``other`` not yet seen."""
        result = OrderedIntSet(self)
        for member in other:
            result.add(member)
        return result

    def intersection(self, other: Iterable[int]) -> OrderedIntSet:
        """Members of this set that are also in ``other``, in this set's order."""
        others = set(other)
        return OrderedIntSet(member for member in self if member in others)

    def difference(self, other: Iterable[int]) -> OrderedIntSet:
        """Members of this set that are not in ``other``, in this set's order."""
        others = set(other)
        return OrderedIntSet(member for member in self if member not in others)