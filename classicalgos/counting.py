"""Element frequencies and stock span."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence

_RULE = "---------------------"


def element_frequencies(items: Iterable[Hashable]) -> dict[Hashable, int]:
    """Count each distinct element, keyed in order of first appearance."""
    return dict(Counter(items))


def format_frequency_table(items: Iterable[Hashable]) -> str:
    """Render the element/frequency table as text."""
    lines = [_RULE, " Element | Frequency", _RULE]
    lines.extend(
        f"    {element}    |    {count}"
        for element, count in element_frequencies(items).items()
    )
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


def stock_span(prices: Sequence[float]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price
    not above that day's price."""
    spans: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        spans.append(day + 1 if not stack else day - stack[-1])
        stack.append(day)
    return spans