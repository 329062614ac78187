"""Boolean parenthesization counting, longest common subsequence, word subsets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import lru_cache

_OPERANDS = frozenset("TF")
_OPERATORS = frozenset("&|^")


def interleave(symbols: str, operators: str) -> str:
    """Alternate symbols and operators, each symbol followed by the next operator."""
    pieces: list[str] = []
    remaining = iter(operators)
    for symbol in symbols:
        pieces.append(symbol)
        pieces.append(next(remaining, ""))
    return "".join(pieces)


def count_true_parenthesizations(expression: str) -> int:
    """Count the ways to parenthesize an expression like ``T|T&F^T`` so it is true."""
    if not expression:
        return 0
    operands = expression[0::2]
    operators = expression[1::2]
    if len(expression) % 2 == 0:
        raise ValueError("expression must end with an operand")
    if not set(operands) <= _OPERANDS:
        raise ValueError("operands must be 'T' or 'F'")
    if not set(operators) <= _OPERATORS:
        raise ValueError("operators must be '&', '|' or '^'")

    @lru_cache(maxsize=None)
    def counts(first: int, last: int) -> tuple[int, int]:
        if first == last:
            return (1, 0) if operands[first] == "T" else (0, 1)
        true_ways = false_ways = 0
        for split in range(first, last):
            left_true, left_false = counts(first, split)
            right_true, right_false = counts(split + 1, last)
            ways = (left_true + left_false) * (right_true + right_false)
            operator = operators[split]
            if operator == "&":
                true_here = left_true * right_true
            elif operator == "|":
                true_here = ways - left_false * right_false
            else:
                true_here = left_true * right_false + left_false * right_true
            true_ways += true_here
            false_ways += ways - true_here
        return true_ways, false_ways

    return counts(0, len(operands) - 1)[0]


def lcs_length(first: Sequence, second: Sequence) -> int:
    """Length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for item in first:
        current = [0]
        for position, other in enumerate(second):
            if item == other:
                current.append(previous[position] + 1)
            else:
                current.append(max(previous[position + 1], current[position]))
        previous = current
    return previous[-1]


def word_subsets(words: Iterable[str], patterns: Iterable[str]) -> list[str]:
    """Return the words that contain every pattern's letters, with multiplicity."""
    required: Counter[str] = Counter()
    for pattern in patterns:
        required |= Counter(pattern)
    result = []
    for word in words:
        letters = Counter(word)
        if all(letters[letter] >= count for letter, count in required.items()):
            result.append(word)
    return result