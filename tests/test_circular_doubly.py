import io

import pytest

from dsatank.circular_doubly import CircularDoublyLinkedList


def ring_state(ring):
    """Return the forward items after checking the ring closes both ways."""
    items = list(ring)
    assert len(ring) == len(items)
    if ring.head is None:
        return items
    reverse = [ring.head.prev.data]
    node = ring.head.prev.prev
    while node is not ring.head.prev:
        reverse.append(node.data)
        node = node.prev
    assert reverse == items[::-1]
    assert ring.head.prev.next is ring.head
    return items


@pytest.mark.parametrize(
    "name, target, expected",
    [
        ("insert_before", "a", ["x", "a", "b", "c"]),
        ("insert_before", "b", ["a", "x", "b", "c"]),
        ("insert_before", "c", ["a", "b", "x", "c"]),
        ("insert_after", "a", ["a", "x", "b", "c"]),
        ("insert_after", "b", ["a", "b", "x", "c"]),
        ("insert_after", "c", ["a", "b", "c", "x"]),
    ],
)
def test_insert_with_value_first(name, target, expected):
    ring = CircularDoublyLinkedList("abc")
    assert getattr(ring, name)("x", target) is True
    assert ring_state(ring) == expected


@pytest.mark.parametrize("name", ["insert_before", "insert_after"])
def test_insert_missing_target(name):
    ring = CircularDoublyLinkedList("ab")
    assert getattr(ring, name)("x", "z") is False
    assert getattr(CircularDoublyLinkedList(), name)("x", "a") is False
    assert ring_state(ring) == ["a", "b"]


@pytest.mark.parametrize(
    "call, removed, left",
    [
        (lambda r: r.delete_head(), "a", ["b", "c"]),
        (lambda r: r.delete_tail(), "c", ["a", "b"]),
        (lambda r: r.delete("a"), "a", ["b", "c"]),
        (lambda r: r.delete("b"), "b", ["a", "c"]),
        (lambda r: r.delete("c"), "c", ["a", "b"]),
    ],
)
def test_removal_detaches_node(call, removed, left):
    ring = CircularDoublyLinkedList("abc")
    node = call(ring)
    assert (node.data, node.next, node.prev) == (removed, None, None)
    assert ring_state(ring) == left


def test_removals_find_nothing():
    assert CircularDoublyLinkedList().delete_head() is None
    assert CircularDoublyLinkedList().delete_tail() is None
    ring = CircularDoublyLinkedList("ab")
    assert ring.delete("z") is None
    assert ring_state(ring) == ["a", "b"]


def test_single_node_cycle_and_removal():
    ring = CircularDoublyLinkedList()
    ring.prepend(5)
    assert ring.head.next is ring.head and ring.head.prev is ring.head
    for remove in (ring.delete_tail, ring.delete_head, lambda: ring.delete(5)):
        assert remove().data == 5
        assert ring.head is None and len(ring) == 0
        ring.append(5)


def test_mixed_prepend_and_append():
    ring = CircularDoublyLinkedList()
    ring.prepend(0)
    ring.append(1)
    ring.prepend(-1)
    ring.append(2)
    assert ring_state(ring) == [-1, 0, 1, 2]


def test_render_and_display():
    assert CircularDoublyLinkedList().render() == "List is empty"
    ring = CircularDoublyLinkedList([1, 2])
    out = io.StringIO()
    ring.display(out)
    assert out.getvalue() == "1 <-> 2 <-> (Head)\n"