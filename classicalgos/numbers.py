"""Primality checks, a square root by bisection, and a vowel test."""

from __future__ import annotations

from dataclasses import dataclass

_VOWELS = frozenset("aeiouAEIOU")


@dataclass(frozen=True)
class PrimeCheck:
    """Outcome of a primality check and the number of trial divisions made."""

    is_prime: bool
    steps: int


def prime_check_half(number: int) -> PrimeCheck:
    """Try divisors from 2 while below half of ``number``, counting the steps.

    Numbers that get no trial division at all are reported prime.
    """
    half = abs(number) // 2 if number >= 0 else -(abs(number) // 2)
    steps = 0
    for divisor in range(2, half):
        steps += 1
        if number % divisor == 0:
            return PrimeCheck(False, steps)
    return PrimeCheck(True, steps)


def is_prime_trial(number: int) -> bool:
    """Report whether no integer in [2, number) divides ``number``."""
    return all(number % divisor for divisor in range(2, number))


def square_root(value: float) -> float:
    """Square root by bisection over whole steps, refined to four decimals.

    Raises ValueError for negative input.
    """
    if value < 0:
        raise ValueError("square root of a negative number")
    root = 0.0
    low = 0.0
    high = float(value)
    while low <= high:
        middle = (low + high) / 2.0
        if middle * middle < value:
            root = middle
            low = middle + 1.0
        else:
            high = middle - 1.0
        if middle * middle == value:
            root = middle
            break
    step = 0.1
    for _ in range(4):
        while root * root <= value:
            root += step
        root -= step
        step /= 10
    return root


def is_vowel(char: str) -> bool:
    """Report whether a single character is an English vowel."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char in _VOWELS