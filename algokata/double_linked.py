"""A doubly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class _Node:
    data: int
    next: Optional[_Node] = None
    prev: Optional[_Node] = None


class DoublyLinkedList:
    """A doubly linked list with head and tail, walkable in both directions."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def append(self, value: int) -> None:
        """Add *value* at the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
            return
        self._tail.next = node
        node.prev = self._tail
        self._tail = node

    def remove(self, value: int) -> None:
        """Unlink the first node holding *value*; do nothing if there is none."""
        curr = self._head
        while curr is not None and curr.data != value:
            curr = curr.next
        if curr is None:
            return
        if curr.prev is None:
            self._head = curr.next
        else:
            curr.prev.next = curr.next
        if curr.next is None:
            self._tail = curr.prev
        else:
            curr.next.prev = curr.prev

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def format(self) -> str:
        """Render the list head to tail as ``Head|a|b|Tail``."""
        return "Head|" + "".join(f"{value}|" for value in self) + "Tail"

    def format_reversed(self) -> str:
        """Render the list tail to head as ``Tail|b|a|Head``."""
        return "Tail|" + "".join(f"{value}|" for value in reversed(self)) + "Head"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"