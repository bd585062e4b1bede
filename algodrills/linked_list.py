"""Singly linked list node type and list exercises."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A singly linked list node holding an integer value."""

    val: int = 0
    next: Optional[ListNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding the given values in order."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    return [node.val for node in _walk(head)]


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink repeated values from a sorted list in place and return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head