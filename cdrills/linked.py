"""Singly linked list with reversal and lookup from the end."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list that appends at the tail."""

    def __init__(self, values: Iterable = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    @classmethod
    def from_iterable(cls, values: Iterable) -> LinkedList:
        """A list holding values in order."""
        return cls(values)

    def append(self, value) -> None:
        """Add value at the end."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous = None
        current = self.head
        self._tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def nth_from_end(self, n: int):
        """Data of the n-th node counted from the end, starting at 1."""
        if not 1 <= n <= self._size:
            raise IndexError(f"no node {n} from the end of a list of {self._size}")
        node = self.head
        for _ in range(self._size - n):
            node = node.next
        return node.data

    def __iter__(self) -> Iterator:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"