"""Fixed-capacity stack and queue."""

from __future__ import annotations

from collections import deque


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class Stack:
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[int] = []

    def push(self, val: int) -> None:
        """Put *val* on top; raise OverflowError if the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(val)

    def pop(self) -> int:
        """Remove and return the top item; raise IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> int:
        """Return the top item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"


class Queue:
    """A first-in, first-out queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[int] = deque()

    def enqueue(self, val: int) -> None:
        """Add *val* at the rear; raise OverflowError if the queue is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("queue is full")
        self._items.append(val)

    def dequeue(self) -> int:
        """Remove and return the front item; raise IndexError if the queue is empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue(capacity={self.capacity}, items={list(self._items)!r})"