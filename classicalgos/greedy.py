"""Greedy algorithms: activity selection, fractional knapsack and Huffman codes."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Activity:
    """An activity with an identifying number and a time interval."""

    index: int
    start: int
    finish: int


def select_activities(starts: Sequence[int], finishes: Sequence[int]) -> list[int]:
    """Pick compatible activities, given in order of finishing time.

    The first activity is always taken; each later one is taken when it
    starts no earlier than the last taken one finishes. Returns positions.
    """
    if len(starts) != len(finishes):
        raise ValueError("starts and finishes must have the same length")
    if not starts:
        return []
    chosen = [0]
    for position in range(1, len(starts)):
        if starts[position] >= finishes[chosen[-1]]:
            chosen.append(position)
    return chosen


def select_sorted_activities(activities: Iterable[Activity]) -> list[Activity]:
    """Order activities by finishing time and select a compatible set greedily."""
    ordered = sorted(activities, key=lambda activity: activity.finish)
    positions = select_activities(
        [activity.start for activity in ordered],
        [activity.finish for activity in ordered],
    )
    return [ordered[position] for position in positions]


@dataclass(frozen=True)
class KnapsackStep:
    """One item put in the knapsack: which one, and how much of it."""

    item: int
    value: float
    weight: float
    fraction: float
    remaining: float


@dataclass(frozen=True)
class KnapsackResult:
    """The items taken, in order, and their total value."""

    steps: tuple[KnapsackStep, ...] = field(default_factory=tuple)
    total: float = 0.0


def fractional_knapsack(
    capacity: float, weights: Sequence[float], values: Sequence[float]
) -> KnapsackResult:
    """Fill a knapsack by best value per weight, taking a fraction of the last item.

    Items with equal ratio are taken in their given order. Stops when the
    knapsack is full or every item has been used.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    order = sorted(range(len(weights)), key=lambda i: -values[i] / weights[i])
    steps: list[KnapsackStep] = []
    total = 0.0
    left = capacity
    for item in order:
        if left <= 0:
            break
        weight, value = weights[item], values[item]
        left -= weight
        if left >= 0:
            fraction = 1.0
        else:
            fraction = 1 + left / weight
        total += fraction * value
        steps.append(KnapsackStep(item, value, weight, fraction, max(left, 0)))
    return KnapsackResult(tuple(steps), total)


@dataclass
class _HuffmanNode:
    frequency: int
    symbol: Hashable = None
    left: _HuffmanNode | None = None
    right: _HuffmanNode | None = None


def huffman_codes(
    symbols: Sequence[Hashable], frequencies: Sequence[int]
) -> dict[Hashable, str]:
    """Build a Huffman code; the lower-frequency subtree gets the bit 0."""
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is required")
    if len(set(symbols)) != len(symbols):
        raise ValueError("symbols must be distinct")
    counter = itertools.count()
    heap = [
        (frequency, next(counter), _HuffmanNode(frequency, symbol))
        for symbol, frequency in zip(symbols, frequencies)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = _HuffmanNode(left.frequency + right.frequency, left=left, right=right)
        heapq.heappush(heap, (merged.frequency, next(counter), merged))

    codes: dict[Hashable, str] = {}

    def walk(node: _HuffmanNode, prefix: str) -> None:
        if node.left is None or node.right is None:
            codes[node.symbol] = prefix
            return
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(heap[0][2], "")
    return codes