"""Singly linked lists: building, reversing and merging sorted lists."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: Any
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def push_front(head: Optional[ListNode], value: Any) -> ListNode:
    """Put a new node holding ``value`` before ``head`` and return it."""
    return ListNode(value, head)


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    cur = head
    while cur is not None:
        nxt = cur.next
        cur.next = prev
        prev, cur = cur, nxt
    return prev


def iter_values(head: Optional[ListNode]) -> Iterator[Any]:
    """Yield the values of the list from head to tail."""
    node = head
    while node is not None:
        yield node.val
        node = node.next


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; None for no values."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def merge_k_sorted(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists into one sorted list by relinking their nodes.

    A min-heap holds the current head of every list, so the merge runs in
    O(N log k). Equal values keep the order of the lists they came from.
    """
    order = count()
    heap: list[tuple[Any, int, ListNode]] = [
        (node.val, next(order), node) for node in lists if node is not None
    ]
    heapq.heapify(heap)
    dummy = ListNode(None)
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    tail.next = None
    return dummy.next