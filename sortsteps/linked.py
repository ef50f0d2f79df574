"""Doubly linked list of integers used by the list-based sorts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass(eq=False)
class Node:
    """A node holding one integer and links to its neighbours."""

    n: int
    prev: Node | None = field(default=None, repr=False)
    next: Node | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list whose nodes can be swapped in place."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value, prev=tail)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def __iter__(self) -> Iterator[int]:
        for node in self.nodes():
            yield node.n

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def swap_adjacent(self, first: Node, second: Node) -> None:
        """Swap two neighbouring nodes, where ``first`` directly precedes ``second``."""
        if first.next is not second or second.prev is not first:
            raise ValueError("nodes are not adjacent in this order")
        before, after = first.prev, second.next
        if before is None:
            self.head = second
        else:
            before.next = second
        if after is not None:
            after.prev = first
        second.prev = before
        second.next = first
        first.prev = second
        first.next = after

    def format(self) -> str:
        """Return the values as a comma-separated line."""
        return ", ".join(str(value) for value in self)