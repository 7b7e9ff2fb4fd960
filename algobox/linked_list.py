"""Singly linked lists and the classic pointer algorithms on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = [
    "ListNode",
    "LinkedList",
    "MultilevelNode",
    "from_values",
    "to_list",
    "reverse_list",
    "swap_pairs",
    "has_cycle",
    "flatten",
]


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: Any = 0, next: ListNode | None = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


class MultilevelNode:
    """A doubly linked node that may also own a child list."""

    __slots__ = ("data", "next", "prev", "child")

    def __init__(
        self,
        data: Any,
        next: MultilevelNode | None = None,
        prev: MultilevelNode | None = None,
        child: MultilevelNode | None = None,
    ) -> None:
        self.data = data
        self.next = next
        self.prev = prev
        self.child = child

    def __repr__(self) -> str:
        return f"MultilevelNode({self.data!r})"


class LinkedList:
    """A singly linked list of values with insertion and deletion at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _node_at(self, index: int) -> ListNode:
        if not 0 <= index < self._size:
            raise IndexError(f"no node at index {index}")
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def insert_at_begin(self, data: Any) -> None:
        """Put ``data`` in front of the list."""
        self.head = ListNode(data, self.head)
        self._size += 1

    def insert_at_end(self, data: Any) -> None:
        """Append ``data`` after the last node."""
        new = ListNode(data)
        if self.head is None:
            self.head = new
        else:
            self._node_at(self._size - 1).next = new
        self._size += 1

    def insert_after(self, index: int, data: Any) -> None:
        """Insert ``data`` right after the node at position ``index``."""
        node = self._node_at(index)
        node.next = ListNode(data, node.next)
        self._size += 1

    def delete_at_begin(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        removed = self.head
        self.head = removed.next
        self._size -= 1
        return removed.val

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if self.head.next is None:
            return self.delete_at_begin()
        before_last = self._node_at(self._size - 2)
        removed = before_last.next
        before_last.next = None
        self._size -= 1
        return removed.val

    def delete(self, key: Any) -> bool:
        """Remove the first node holding ``key``; return whether one was found."""
        previous: ListNode | None = None
        node = self.head
        while node is not None and node.val != key:
            previous, node = node, node.next
        if node is None:
            return False
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        self._size -= 1
        return True

    def __contains__(self, key: object) -> bool:
        return any(value == key for value in self)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "[" + "".join(f" {value} " for value in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a chain of :class:`ListNode` from ``values``; None if empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[Any]:
    """Collect the values of a (cycle-free) chain into a list."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a chain in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes in place and return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    current = head
    while current is not None and current.next is not None:
        first, second = current, current.next
        previous.next = second
        first.next = second.next
        second.next = first
        previous = first
        current = first.next
    return dummy.next


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def flatten(head: MultilevelNode | None) -> MultilevelNode | None:
    """Flatten a multilevel list level by level, appending each child list
    to the tail; child links are cleared. Returns ``head``."""
    if head is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    node: MultilevelNode | None = head
    while node is not None:
        if node.child is not None:
            child = node.child
            tail.next = child
            child.prev = tail
            while tail.next is not None:
                tail = tail.next
            node.child = None
        node = node.next
    return head