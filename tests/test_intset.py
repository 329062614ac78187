import pytest

from classicalgos.intset import OrderedIntSet


@pytest.fixture
def a():
    result = OrderedIntSet()
    for member in (5, 10, 15, 20, 20, 25):
        result.add(member)
    return result


@pytest.fixture
def b():
    return OrderedIntSet([20, 25, 30, 35])


def test_add_ignores_duplicates(a):
    assert list(a) == [5, 10, 15, 20, 25]
    assert len(a) == 5


def test_is_empty(a):
    assert OrderedIntSet().is_empty() is True
    assert a.is_empty() is False


def test_union(a, b):
    assert list(a.union(b)) == [5, 10, 15, 20, 25, 30, 35]


def test_intersection(a, b):
    assert list(a.intersection(b)) == [20, 25]


def test_difference_both_ways(a, b):
    assert list(a.difference(b)) == [5, 10, 15]
    assert list(b.difference(a)) == [30, 35]


def test_operations_leave_operands_untouched(a, b):
    a.union(b)
    a.intersection(b)
    a.difference(b)
    assert list(a) == [5, 10, 15, 20, 25]
    assert list(b) == [20, 25, 30, 35]


def test_difference_and_intersection_partition_set(a, b):
    common = set(a.intersection(b))
    only = set(a.difference(b))
    assert common | only == set(a)
    assert not common & only


def test_str_lists_members(b):
    assert str(b) == "20 25 30 35"