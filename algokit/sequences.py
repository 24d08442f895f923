"""Small algorithms over sequences: greedy, voting, chunking, search, Fibonacci."""

from __future__ import annotations

from functools import lru_cache
from typing import Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)

_MEMO_STEP = 400


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of non-overlapping ``(start, end)`` activities.

    An activity may start exactly when the previous one ends.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    taken = 1
    end = ordered[0][1]
    for start, finish in ordered[1:]:
        if start >= end:
            taken += 1
            end = finish
    return taken


def majority_element(values: Iterable[T]) -> T:
    """Boyer-Moore majority vote candidate.

    The result is the majority element whenever one occurs more than
    ``len(values) / 2`` times; otherwise it is merely the surviving candidate.
    """
    iterator = iter(values)
    try:
        candidate = next(iterator)
    except StopIteration:
        raise ValueError("majority of an empty sequence") from None
    count = 1
    for value in iterator:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def max_chunks_to_sorted(arr: Sequence[int]) -> int:
    """Maximum chunks a permutation of ``0..n-1`` splits into so that
    sorting each chunk sorts the whole."""
    chunks = 0
    array_sum = 0
    index_sum = 0
    for index, value in enumerate(arr):
        array_sum += value
        index_sum += index
        if array_sum == index_sum:
            chunks += 1
    return chunks


def contains(values: Iterable[T], target: T) -> bool:
    """Linear search: whether ``target`` occurs in ``values``."""
    return any(value == target for value in values)


def _check_n(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fibonacci(n: int) -> int:
    """Fibonacci number with ``f(0) = f(1) = 0`` and ``f(2) = 1``, computed bottom-up."""
    _check_n(n)
    if n < 2:
        return 0
    previous, current = 0, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n < 2:
        return 0
    if n == 2:
        return 1
    return _fib(n - 1) + _fib(n - 2)


def fibonacci_memo(n: int) -> int:
    """Same numbers as :func:`fibonacci`, computed top-down with memoisation."""
    _check_n(n)
    # Fill the cache in steps so the recursion never runs deep.
    for k in range(0, n, _MEMO_STEP):
        _fib(k)
    return _fib(n)