import random

import pytest

from algokit.segment_tree import MaxSegmentTree

VALUES = [5, 1, 8, 3, 9, 2, 7, 4, 6]


def test_len_matches_input():
    assert len(MaxSegmentTree(VALUES)) == len(VALUES)


def test_empty_rejected():
    with pytest.raises(ValueError):
        MaxSegmentTree([])


def test_single_point_queries_return_values():
    tree = MaxSegmentTree(VALUES)
    assert [tree.query(i, i) for i in range(len(VALUES))] == VALUES


def test_full_range_query_is_maximum():
    tree = MaxSegmentTree(VALUES)
    assert tree.query(0, len(VALUES) - 1) == max(VALUES)


def test_query_result_is_upper_bound_attained_in_range():
    tree = MaxSegmentTree(VALUES)
    for left in range(len(VALUES)):
        for right in range(left, len(VALUES)):
            result = tree.query(left, right)
            window = VALUES[left : right + 1]
            assert result in window
            assert all(v <= result for v in window)


def test_update_changes_queries():
    tree = MaxSegmentTree(VALUES)
    tree.update(1, 100)
    assert tree.query(1, 1) == 100
    assert tree.query(0, len(VALUES) - 1) == 100
    tree.update(1, -5)
    assert tree.query(0, 1) == 5


def test_first_at_least_property_random():
    rng = random.Random(1234)
    values = [rng.randint(-50, 50) for _ in range(40)]
    tree = MaxSegmentTree(values)
    for _ in range(200):
        x = rng.randint(-60, 60)
        start = rng.randrange(len(values))
        found = tree.first_at_least(x, start)
        if found is None:
            assert all(v < x for v in values[start:])
        else:
            assert found >= start
            assert values[found] >= x
            assert all(v < x for v in values[start:found])


def test_first_at_least_defaults_to_start_zero():
    tree = MaxSegmentTree(VALUES)
    assert tree.first_at_least(8) == VALUES.index(8)
    assert tree.first_at_least(max(VALUES) + 1) is None


def test_first_at_least_respects_start():
    tree = MaxSegmentTree(VALUES)
    assert tree.first_at_least(8, 3) == VALUES.index(9)


def test_first_at_least_after_update():
    tree = MaxSegmentTree(VALUES)
    tree.update(0, 50)
    assert tree.first_at_least(50) == 0
    tree.update(0, 0)
    assert tree.first_at_least(50) is None


def test_query_out_of_range():
    tree = MaxSegmentTree(VALUES)
    with pytest.raises(IndexError):
        tree.query(0, len(VALUES))


def test_query_reversed_bounds():
    tree = MaxSegmentTree(VALUES)
    with pytest.raises(ValueError):
        tree.query(3, 2)


def test_update_out_of_range():
    tree = MaxSegmentTree(VALUES)
    with pytest.raises(IndexError):
        tree.update(-1, 0)