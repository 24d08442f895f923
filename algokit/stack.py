"""Fixed-capacity stack."""

from __future__ import annotations

from typing import Any, Iterator


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raises StackFullError when the stack is full."""
        if len(self._items) >= self._capacity:
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        """Items from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)