import pytest

from sortsteps.linked import DoublyLinkedList, Node


def _check_links(linked):
    nodes = list(linked.nodes())
    if nodes:
        assert nodes[0].prev is None
        assert nodes[-1].next is None
    for left, right in zip(nodes, nodes[1:]):
        assert left.next is right
        assert right.prev is left


def test_build_and_iterate():
    linked = DoublyLinkedList([19, 48, 99])
    assert list(linked) == [19, 48, 99]
    assert len(linked) == 3
    _check_links(linked)


def test_empty_list():
    linked = DoublyLinkedList()
    assert linked.head is None
    assert list(linked) == []
    assert len(linked) == 0
    assert linked.format() == ""


def test_nodes_yield_node_objects():
    linked = DoublyLinkedList([5, 6])
    nodes = list(linked.nodes())
    assert all(isinstance(node, Node) for node in nodes)
    assert [node.n for node in nodes] == [5, 6]


def test_format_matches_listing():
    assert DoublyLinkedList([19, 48, 99]).format() == "19, 48, 99"
    assert DoublyLinkedList([7]).format() == "7"


def test_swap_head_updates_head():
    linked = DoublyLinkedList([1, 2, 3])
    first, second, _ = linked.nodes()
    linked.swap_adjacent(first, second)
    assert linked.head is second
    assert list(linked) == [2, 1, 3]
    _check_links(linked)


def test_swap_tail():
    linked = DoublyLinkedList([1, 2, 3])
    _, second, third = linked.nodes()
    linked.swap_adjacent(second, third)
    assert list(linked) == [1, 3, 2]
    _check_links(linked)


def test_swap_middle_keeps_nodes():
    linked = DoublyLinkedList([1, 2, 3, 4])
    before = set(map(id, linked.nodes()))
    nodes = list(linked.nodes())
    linked.swap_adjacent(nodes[1], nodes[2])
    assert list(linked) == [1, 3, 2, 4]
    assert set(map(id, linked.nodes())) == before
    _check_links(linked)


def test_swap_rejects_non_adjacent():
    linked = DoublyLinkedList([1, 2, 3])
    first, _, third = linked.nodes()
    with pytest.raises(ValueError):
        linked.swap_adjacent(first, third)


def test_swap_rejects_wrong_order():
    linked = DoublyLinkedList([1, 2])
    first, second = linked.nodes()
    with pytest.raises(ValueError):
        linked.swap_adjacent(second, first)