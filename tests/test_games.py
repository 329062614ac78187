import random

import pytest

from classicalgos.games import Outcome, computer_choice, play, pyramid

CHOICES = "rps"


class FixedRandom:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def test_rock_beats_scissors():
    assert play("r", "s") is Outcome.WIN
    assert play("s", "r") is Outcome.LOSE


@pytest.mark.parametrize("choice", CHOICES)
def test_same_choice_draws(choice):
    assert play(choice, choice) is Outcome.DRAW


@pytest.mark.parametrize("you", CHOICES)
@pytest.mark.parametrize("computer", CHOICES)
def test_play_is_antisymmetric(you, computer):
    assert play(you, computer) == -play(computer, you)


@pytest.mark.parametrize("choice", CHOICES)
def test_each_choice_wins_once(choice):
    outcomes = [play(choice, other) for other in CHOICES]
    assert outcomes.count(Outcome.WIN) == 1
    assert outcomes.count(Outcome.LOSE) == 1


def test_play_rejects_unknown():
    with pytest.raises(ValueError):
        play("x", "r")
    with pytest.raises(ValueError):
        play("r", "rock")


@pytest.mark.parametrize(
    "number, expected",
    [(1, "r"), (33, "r"), (34, "p"), (66, "p"), (67, "s"), (100, "s")],
)
def test_computer_choice_thresholds(number, expected):
    rng = FixedRandom(number)
    assert computer_choice(rng) == expected
    assert rng.calls == [(1, 100)]


def test_computer_choice_seeded_is_repeatable():
    first = [computer_choice(random.Random(5)) for _ in range(3)]
    second = [computer_choice(random.Random(5)) for _ in range(3)]
    assert first == second
    assert set(first) <= set(CHOICES)


@pytest.mark.parametrize("rows", [1, 2, 3, 5])
def test_pyramid_shape(rows):
    lines = pyramid(rows).split("\n")
    assert lines[-1] == ""
    lines = lines[:-1]
    assert len(lines) == rows + 1
    assert lines[0].strip() == ""
    for row, line in enumerate(lines):
        assert len(line) == 2 * rows
        if row:
            assert line.count("*") == 2 * row - 1
            assert line[rows] == "*"
            assert line[rows - row + 1:rows + row] == "*" * (2 * row - 1)


def test_pyramid_empty_for_negative_rows():
    assert pyramid(-1) == ""