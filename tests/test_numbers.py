import math

import pytest

from classicalgos.numbers import (
    PrimeCheck,
    is_prime_trial,
    is_vowel,
    prime_check_half,
    square_root,
)

PRIMES = [2, 3, 5, 7, 11, 13, 29, 97, 101]
COMPOSITES = [9, 15, 21, 25, 49, 100, 121]


@pytest.mark.parametrize("number", PRIMES)
def test_trial_primes(number):
    assert is_prime_trial(number) is True


@pytest.mark.parametrize("number", COMPOSITES + [4, 6])
def test_trial_composites(number):
    assert is_prime_trial(number) is False


@pytest.mark.parametrize("number", PRIMES)
def test_half_check_primes(number):
    result = prime_check_half(number)
    assert result.is_prime is True
    assert result.steps == max(0, number // 2 - 2)


@pytest.mark.parametrize("number", COMPOSITES)
def test_half_check_composites_stop_at_smallest_divisor(number):
    result = prime_check_half(number)
    assert result.is_prime is False
    smallest = next(d for d in range(2, number) if number % d == 0)
    assert result.steps == smallest - 1


def test_half_check_result_is_value_object():
    assert prime_check_half(15) == PrimeCheck(False, 2)


@pytest.mark.parametrize("value", [0, 0.25, 1, 2, 10, 16, 81, 12345.678])
def test_square_root_close(value):
    result = square_root(value)
    assert abs(result - math.sqrt(value)) < 1e-3


@pytest.mark.parametrize("value", [2, 3, 50, 99.5, 1000])
def test_square_root_not_above(value):
    result = square_root(value)
    assert result * result <= value


def test_square_root_negative():
    with pytest.raises(ValueError):
        square_root(-4)


@pytest.mark.parametrize("char", list("aeiouAEIOU"))
def test_vowels(char):
    assert is_vowel(char) is True


@pytest.mark.parametrize("char", list("bzYQ1 ?"))
def test_non_vowels(char):
    assert is_vowel(char) is False


@pytest.mark.parametrize("text", ["", "ae"])
def test_vowel_needs_single_char(text):
    with pytest.raises(ValueError):
        is_vowel(text)