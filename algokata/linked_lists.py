"""Singly linked list nodes and the classic exercises built on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list, compared by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding *values* in order and return its head, or None if empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at *head*."""
    return [] if head is None else list(head)


def format_list(head: Optional[ListNode]) -> str:
    """Render the list as ``a -> b -> NULL``."""
    return "".join(f"{value} -> " for value in to_values(head)) + "NULL"


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if following ``next`` from *head* never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder ``L0, L1, ..., Ln`` into ``L0, Ln, L1, Ln-1, ...`` in place."""
    if head is None:
        return
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]
    second = reverse_list(slow.next)
    slow.next = None
    first: Optional[ListNode] = head
    while second is not None and first is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the *n*-th node counted from the end and return the new head.

    Raises ValueError when *n* is not between 1 and the length of the list.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(0, head)
    fast: Optional[ListNode] = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError(f"list is shorter than {n} nodes")
        fast = fast.next
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next  # type: ignore[assignment]
    slow.next = slow.next.next  # type: ignore[union-attr]
    return dummy.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list and return its head.

    On equal values the node from *list2* comes first.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next