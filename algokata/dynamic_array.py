"""A growable array that doubles its capacity when full."""

from __future__ import annotations

from typing import Iterator


class DynamicArray:
    """An array of integers with an explicit capacity that doubles on overflow."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._items: list[int] = []

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for size {len(self._items)}")

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check_index(index)
        self._items[index] = value

    def push_back(self, value: int) -> None:
        """Append *value*, doubling the capacity first if the array is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def pop_back(self) -> int:
        """Remove and return the last value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty array")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def capacity(self) -> int:
        """Return the number of values the array can hold before it grows."""
        return self._capacity

    def __repr__(self) -> str:
        return f"DynamicArray(capacity={self._capacity}, items={self._items!r})"