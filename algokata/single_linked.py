"""A singly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class _Node:
    data: int
    next: Optional[_Node] = None


class SinglyLinkedList:
    """A singly linked list supporting append and first-match removal."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def append(self, value: int) -> None:
        """Add *value* at the end of the list."""
        node = _Node(value)
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def remove(self, value: int) -> None:
        """Unlink the first node holding *value*; do nothing if there is none."""
        if self._head is None:
            return
        if self._head.data == value:
            self._head = self._head.next
            return
        curr = self._head
        while curr.next is not None:
            if curr.next.data == value:
                curr.next = curr.next.next
                return
            curr = curr.next

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "head|" + "".join(f"{value}|" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"