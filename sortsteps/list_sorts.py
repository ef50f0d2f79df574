"""In-place sorts of doubly linked lists that report each swap."""

from __future__ import annotations

from typing import Callable, Optional

from sortsteps.linked import DoublyLinkedList, Node

StepCallback = Optional[Callable[[DoublyLinkedList], None]]


def _notify(on_step: StepCallback, linked: DoublyLinkedList) -> None:
    if on_step is not None:
        on_step(linked)


def insertion_sort_list(linked: DoublyLinkedList, on_step: StepCallback = None) -> None:
    """Insertion sort by swapping nodes; ``on_step`` is called after every swap."""
    if linked.head is None:
        return
    current = linked.head.next
    while current is not None:
        following = current.next
        while current.prev is not None and current.n < current.prev.n:
            linked.swap_adjacent(current.prev, current)
            _notify(on_step, linked)
        current = following


def _forward_pass(
    linked: DoublyLinkedList, lower: Node | None, upper: Node | None, on_step: StepCallback
) -> tuple[bool, Node]:
    swapped = False
    current = lower.next if lower is not None else linked.head
    while current.next is not upper:
        if current.n > current.next.n:
            linked.swap_adjacent(current, current.next)
            swapped = True
            _notify(on_step, linked)
        else:
            current = current.next
    return swapped, current


def _backward_pass(
    linked: DoublyLinkedList, lower: Node | None, upper: Node, on_step: StepCallback
) -> tuple[bool, Node]:
    swapped = False
    current = upper
    while current.prev is not lower:
        if current.n < current.prev.n:
            linked.swap_adjacent(current.prev, current)
            swapped = True
            _notify(on_step, linked)
        else:
            current = current.prev
    return swapped, current


def cocktail_sort_list(linked: DoublyLinkedList, on_step: StepCallback = None) -> None:
    """Cocktail shaker sort by swapping nodes; ``on_step`` is called after every swap."""
    if linked.head is None or linked.head.next is None:
        return
    lower: Node | None = None
    upper: Node | None = None
    while True:
        swapped, upper = _forward_pass(linked, lower, upper, on_step)
        if not swapped:
            break
        swapped, lower = _backward_pass(linked, lower, upper, on_step)
        if not swapped:
            break