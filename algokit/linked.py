"""Singly linked lists: sorted merging and a FIFO queue."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = None


def _walk(head: Node | None) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[Any]:
    """Return the data of the list starting at ``head`` as a Python list."""
    return [node.data for node in _walk(head)]


def sorted_merge(first: Node | None, second: Node | None) -> Node | None:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal data the node from ``first`` comes first.
    """
    if first is None:
        return second
    if second is None:
        return first
    if first.data <= second.data:
        head, first = first, first.next
    else:
        head, second = second, second.next
    tail = head
    while first is not None and second is not None:
        if first.data <= second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return head


class LinkedQueue:
    """A first-in first-out queue backed by a singly linked list."""

    def __init__(self) -> None:
        self._front: Node | None = None
        self._rear: Node | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._front))

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self._front is None:
            return "Empty Queue"
        return "Elements in the current Queue are : " + " ".join(map(str, self))