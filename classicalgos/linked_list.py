"""Singly linked lists: a list class and functions over bare node chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a node chain holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[Any]:
    """Return the values of a node chain in order."""
    return [node.val for node in _nodes(head)]


class LinkedList:
    """A singly linked list with insertion, deletion, search and sorting."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = from_values(values)

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in _nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __contains__(self, key: object) -> bool:
        return any(node.val == key for node in _nodes(self.head))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def insert_at_beginning(self, value: Any) -> ListNode:
        """Put ``value`` at the front and return its node."""
        self.head = ListNode(value, self.head)
        return self.head

    def insert_after(self, node: ListNode | None, value: Any) -> ListNode:
        """Put ``value`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("the given previous node cannot be None")
        node.next = ListNode(value, node.next)
        return node.next

    def insert_at_end(self, value: Any) -> ListNode:
        """Put ``value`` at the back and return its node."""
        new_node = ListNode(value)
        if self.head is None:
            self.head = new_node
            return new_node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = new_node
        return new_node

    def delete(self, key: Any) -> bool:
        """Remove the first node holding ``key``; report whether one was found."""
        previous: ListNode | None = None
        for node in _nodes(self.head):
            if node.val == key:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return True
            previous = node
        return False

    def sort(self) -> None:
        """Sort the values in place, ascending; the nodes themselves stay put."""
        nodes = list(_nodes(self.head))
        for node, value in zip(nodes, sorted(node.val for node in nodes)):
            node.val = value


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its chain without access to the head.

    The node takes over its successor's value and link, so it must not be
    the last node.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node in place")
    node.val = successor.val
    node.next = successor.next


def partition(head: ListNode | None, pivot: Any) -> ListNode | None:
    """Relink so values below ``pivot`` come first, keeping relative order."""
    if head is None or head.next is None:
        return head
    low = ListNode()
    high = ListNode()
    low_tail, high_tail = low, high
    node = head
    while node is not None:
        following = node.next
        node.next = None
        if node.val < pivot:
            low_tail.next = node
            low_tail = node
        else:
            high_tail.next = node
            high_tail = node
        node = following
    low_tail.next = high.next
    return low.next


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse a chain in place and return the new head."""
    previous: ListNode | None = None
    while head is not None:
        following = head.next
        head.next = previous
        previous = head
        head = following
    return previous


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate a chain ``k`` places to the right and return the new head."""
    if head is None or head.next is None:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    shift = k % length
    if shift == 0:
        return head
    new_tail = head
    for _ in range(length - shift - 1):
        new_tail = new_tail.next  # type: ignore[assignment]
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head