import io

from dsatank.circular import CircularLinkedList


def _assert_ring(cll):
    nodes = []
    if cll.head is not None:
        curr = cll.head
        while True:
            nodes.append(curr)
            curr = curr.next
            if curr is cll.head:
                break
    assert len(nodes) == len(cll)


def test_empty_ring():
    cll = CircularLinkedList()
    assert list(cll) == []
    assert len(cll) == 0
    assert cll.render() == "List is empty"
    assert cll.delete_head() is None
    assert cll.delete_last() is None
    assert cll.delete(1) is None


def test_single_node_points_to_itself():
    cll = CircularLinkedList()
    cll.prepend(4)
    assert cll.head.next is cll.head
    assert list(cll) == [4]


def test_demo_sequence():
    cll = CircularLinkedList()
    cll.prepend(0)
    cll.append(1)
    cll.prepend(-1)
    cll.append(2)
    assert list(cll) == [-1, 0, 1, 2]
    assert len(cll) == 4
    _assert_ring(cll)
    removed = cll.delete(2)
    assert removed.data == 2
    assert list(cll) == [-1, 0, 1]
    _assert_ring(cll)


def test_render_and_display():
    cll = CircularLinkedList([1, 2])
    assert cll.render() == "Start -> 1 -> 2 -> (Head)"
    out = io.StringIO()
    cll.display(out)
    assert out.getvalue() == "Start -> 1 -> 2 -> (Head)\n"


def test_display_defaults_to_stdout(capsys):
    CircularLinkedList().display()
    assert capsys.readouterr().out == "List is empty\n"


def test_delete_head():
    cll = CircularLinkedList([1, 2, 3])
    assert cll.delete_head().data == 1
    assert list(cll) == [2, 3]
    _assert_ring(cll)
    assert cll.delete_head().data == 2
    assert cll.delete_head().data == 3
    assert cll.head is None
    assert len(cll) == 0


def test_delete_last():
    cll = CircularLinkedList([1, 2, 3])
    assert cll.delete_last().data == 3
    assert list(cll) == [1, 2]
    _assert_ring(cll)
    assert cll.delete_last().data == 2
    assert cll.delete_last().data == 1
    assert cll.head is None
    assert len(cll) == 0


def test_delete_head_value():
    cll = CircularLinkedList([5, 6, 7])
    assert cll.delete(5).data == 5
    assert list(cll) == [6, 7]
    _assert_ring(cll)


def test_delete_only_node_by_value():
    cll = CircularLinkedList([5])
    assert cll.delete(5).data == 5
    assert cll.head is None
    assert len(cll) == 0


def test_delete_missing_value():
    cll = CircularLinkedList([1, 2, 3])
    assert cll.delete(9) is None
    assert list(cll) == [1, 2, 3]
    assert len(cll) == 3