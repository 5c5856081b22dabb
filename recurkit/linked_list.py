"""Singly linked list nodes and pairwise swapping."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes by relinking them and return the new head."""
    anchor = ListNode(next=head)
    prev = anchor
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return anchor.next