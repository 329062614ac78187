import random

import pytest

from classicalgos.sorting import (
    bubble_sort,
    bubble_sort_counted,
    heap_sort,
    merge_sort,
    timing_table,
)


@pytest.mark.parametrize(
    "data",
    [
        [5, 1, 4, 2, 8],
        [12, 11, 13, 5, 6, 7],
        [],
        [1],
        [3, 3, 3],
        [-4, 0, 9, -4, 2],
    ],
)
def test_sorts_match_builtin(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected


def test_sorts_random_data():
    rng = random.Random(7)
    data = [rng.randint(-1000, 1000) for _ in range(300)]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected


def test_sort_does_not_mutate_input():
    data = [5, 1, 4, 2, 8]
    snapshot = list(data)
    assert bubble_sort(data) == [1, 2, 4, 5, 8]
    assert data == snapshot
    assert heap_sort(data) == [1, 2, 4, 5, 8]
    assert data == snapshot
    assert merge_sort(data) == [1, 2, 4, 5, 8]
    assert data == snapshot


def test_merge_sort_is_stable():
    class Key:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __le__(self, other):
            return self.key <= other.key

    data = [Key(2, "a"), Key(1, "b"), Key(2, "c"), Key(1, "d")]
    result = merge_sort(data)
    assert [k.tag for k in result] == ["b", "d", "a", "c"]


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10])
def test_bubble_comparison_count(n):
    data = list(range(n, 0, -1))
    result, comparisons = bubble_sort_counted(data)
    assert result == sorted(data)
    assert comparisons == n * (n - 1) // 2


def test_timing_table_rows():
    rows = timing_table([10, 20, 30], seed=1)
    assert [row[0] for row in rows] == [1, 2, 3]
    assert [row[1] for row in rows] == [10, 20, 30]
    assert all(row[2] >= 0 for row in rows)