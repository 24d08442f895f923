import pytest

from algokit.linked_list import LinkedList


def test_append_keeps_order():
    items = LinkedList()
    for value in (7, 8, 9):
        items.append(value)
    assert list(items) == [7, 8, 9]
    assert len(items) == 3


def test_push_front_prepends():
    items = LinkedList([2, 3])
    items.push_front(1)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_contains():
    items = LinkedList([4, 5, 6])
    assert 5 in items
    assert 10 not in items


def test_remove_head_middle_and_tail():
    items = LinkedList([1, 2, 3, 4])
    items.remove(1)
    assert list(items) == [2, 3, 4]
    items.remove(3)
    assert list(items) == [2, 4]
    items.remove(4)
    assert list(items) == [2]
    assert len(items) == 1


def test_remove_only_first_occurrence():
    items = LinkedList([5, 6, 5])
    items.remove(5)
    assert list(items) == [6, 5]


def test_remove_missing_raises():
    items = LinkedList([1, 2])
    with pytest.raises(ValueError):
        items.remove(9)
    assert list(items) == [1, 2]


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().remove(1)


def test_reverse():
    items = LinkedList([1, 2, 3, 4, 5])
    items.reverse()
    assert list(items) == [5, 4, 3, 2, 1]


def test_reverse_twice_restores():
    values = [3, 1, 4, 1, 5]
    items = LinkedList(values)
    items.reverse()
    items.reverse()
    assert list(items) == values


def test_reverse_empty_stays_empty():
    items = LinkedList()
    items.reverse()
    assert list(items) == []


def test_rotate_last_k_source_example():
    items = LinkedList([1, 2, 3, 4, 5, 6])
    items.rotate_last_k(3)
    assert list(items) == [4, 5, 6, 1, 2, 3]


def test_rotate_zero_is_identity():
    items = LinkedList([1, 2, 3])
    items.rotate_last_k(0)
    assert list(items) == [1, 2, 3]


def test_rotate_then_append_uses_new_tail():
    items = LinkedList([1, 2, 3, 4])
    items.rotate_last_k(1)
    items.append(9)
    assert list(items) == [4, 1, 2, 3, 9]


@pytest.mark.parametrize("k", [-1, 4, 10])
def test_rotate_out_of_range(k):
    items = LinkedList([1, 2, 3, 4])
    with pytest.raises(ValueError):
        items.rotate_last_k(k)


def test_rotate_preserves_elements():
    values = [10, 20, 30, 40, 50]
    items = LinkedList(values)
    items.rotate_last_k(2)
    assert sorted(items) == values
    assert len(items) == len(values)


def test_odd_even_source_example():
    items = LinkedList()
    for value in (1, 2, 3, 4, 5, 6):
        items.push_front(value)
    items.odd_even()
    assert list(items) == [6, 4, 2, 5, 3, 1]


def test_odd_even_with_odd_length_terminates():
    items = LinkedList([1, 2, 3, 4, 5, 6, 7])
    items.odd_even()
    assert list(items) == [1, 3, 5, 7, 2, 4, 6]
    assert len(items) == 7


def test_odd_even_short_lists_unchanged():
    pair = LinkedList([1, 2])
    pair.odd_even()
    single = LinkedList([1])
    single.odd_even()
    assert list(pair) == [1, 2]
    assert list(single) == [1]