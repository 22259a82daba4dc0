"""A bounded first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class QueueFullError(OverflowError):
    """Raised when an item is added to a full queue."""


class QueueEmptyError(IndexError):
    """Raised when an empty queue is dequeued."""


class CircularQueue(Generic[T]):
    """A queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: Deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back of the queue."""
        if self.is_full():
            raise QueueFullError("full queue")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError("empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self._items)!r})"