"""Rock-paper-scissors and a star pyramid."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Protocol

_BEATS = {"r": "s", "p": "r", "s": "p"}


class Outcome(IntEnum):
    """Result of a round from the player's side."""

    LOSE = -1
    DRAW = 0
    WIN = 1


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def play(you: str, computer: str) -> Outcome:
    """Score a round; choices are 'r' (rock), 'p' (paper) or 's' (scissors)."""
    for choice in (you, computer):
        if choice not in _BEATS:
            raise ValueError(f"unknown choice {choice!r}")
    if you == computer:
        return Outcome.DRAW
    return Outcome.WIN if _BEATS[you] == computer else Outcome.LOSE


def computer_choice(rng: _RandomSource | None = None) -> str:
    """Draw 1..100: up to 33 is rock, up to 66 paper, the rest scissors."""
    source = rng if rng is not None else random.Random()
    number = source.randint(1, 100)
    if number <= 33:
        return "r"
    if number <= 66:
        return "p"
    return "s"


def pyramid(rows: int) -> str:
    """Draw a centred star pyramid of ``rows`` rows under one blank row."""
    lines = []
    for row in range(rows + 1):
        lines.append(
            "".join(
                "*" if rows - (row - 1) <= column <= rows + (row - 1) else " "
                for column in range(2 * rows)
            )
        )
    return "".join(line + "\n" for line in lines)