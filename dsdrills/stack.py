"""A bounded last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, List, TypeVar

T = TypeVar("T")


class StackOverflowError(OverflowError):
    """Raised when an item is pushed onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when an empty stack is popped or peeked."""


class Stack(Generic[T]):
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[T] = []

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"