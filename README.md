# dsatank

A small collection of classic data structures and algorithms:

- `SinglyLinkedList` (`dsatank.singly`)
- `CircularLinkedList` (`dsatank.circular`)
- `DoublyLinkedList` (`dsatank.doubly`)
- `CircularDoublyLinkedList` (`dsatank.circular_doubly`)
- a recursive Tower of Hanoi solver, `hanoi` (`dsatank.hanoi`)
- a demonstration command built on a small `Process` record (`dsatank.demo`)

Every list is built from `Node` objects (`dsatank.node`). A node holds its
value in `data` and links to its neighbours through `next` and `prev`. Nodes
compare by identity, and their `repr` is `Node(<data>)`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

No third-party libraries are needed at run time.

## Linked lists

All four lists take an optional iterable of starting values, which are
appended in order. Each list exposes its first node as `head` and its node
count as `size`; `len()` returns the same count, and iterating a list yields
its values from head to tail. `SinglyLinkedList` also has a read-only `count`
property.

```python
from dsatank.singly import SinglyLinkedList

items = SinglyLinkedList([1, 2])
items.prepend(0)              # [0, 1, 2]
items.append(3)               # [0, 1, 2, 3]
items.insert_after(0, 4)      # [0, 4, 1, 2, 3]
items.insert_before(3, 10)    # [0, 4, 1, 2, 10, 3]

node = items.search(2)        # the first node holding 2, or None
print(node.data)              # 2

items.delete_head()           # removes and returns the node holding 0
items.delete_tail()           # removes and returns the node holding 3
items.delete(2)               # removes and returns the first node holding 2

print(list(items), len(items))   # [4, 1, 10] 3
items.display()                  # Start -> 4 -> 1 -> 10 -> nil
```

`insert_after` and `insert_before` return `True` when the target value was
found and the new node inserted, `False` otherwise. The delete methods return
the removed node, or `None` when the list is empty or the target is missing.
Values are matched with `==`, and only the first match is used.

`DoublyLinkedList` offers the same operations as `SinglyLinkedList`, apart
from `search` and `count`. Nodes removed from it have their `next` and `prev`
cleared.

`CircularLinkedList` keeps its last node linked back to the head. It offers
`prepend`, `append`, `delete_head`, `delete_last` and `delete`.

`CircularDoublyLinkedList` links in both directions and closes the ring: the
head's `prev` is the last node. It offers `prepend`, `append`,
`insert_before`, `insert_after`, `delete_head`, `delete_tail` and `delete`.
Note the argument order of its insert methods: the new value comes first,
then the target. Inserting before the head makes the new node the head.

```python
from dsatank.circular_doubly import CircularDoublyLinkedList

ring = CircularDoublyLinkedList(["b", "d"])
ring.insert_before("a", "b")   # "a" goes before "b" and becomes the head
ring.insert_after("c", "b")    # "c" goes after "b"
print(list(ring))              # ['a', 'b', 'c', 'd']
ring.delete_tail()             # removes and returns the node holding "d"
```

### Printing

`render()` returns a list as one line of text and `display(file=None)` prints
that line (to standard output by default). An empty list renders as
`List is empty`. Otherwise, for the values 1 and 2:

| List                       | Rendering                    |
|----------------------------|------------------------------|
| `SinglyLinkedList`         | `Start -> 1 -> 2 -> nil`     |
| `CircularLinkedList`       | `Start -> 1 -> 2 -> (Head)`  |
| `DoublyLinkedList`         | `Start -> 1 -> 2 -> `        |
| `CircularDoublyLinkedList` | `1 <-> 2 <-> (Head)`         |

## Tower of Hanoi

`hanoi(n, src, dst, tmp)` moves the top `n` disks from the `src` list onto
`dst`, using `tmp` as the spare peg. Each peg is a list whose last item is its
top disk; the lists are changed in place. It returns the number of
single-disk moves made, which is 2^n - 1. A `ValueError` is raised when `n`
is less than 1 or greater than the number of disks on `src`.

```python
from dsatank.hanoi import hanoi

src, dst, tmp = ["3", "2", "1"], [], []
moves = hanoi(len(src), src, dst, tmp)
print(moves)           # 7
print(src, dst, tmp)   # [] ['3', '2', '1'] []
```

## Commands

Solve a tower and print one line per move followed by the final pegs. The
optional argument is the number of disks (default 4, at least 1):

```
dsatank-hanoi
dsatank-hanoi 3
```

Run through the list operations on a few sample `Process` records (printed
as `{PID:n}`) and print the results:

```
dsatank-demo
```