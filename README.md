# containerkit

Small, dependency-free container data structures for Python.

| Module | What it holds |
| --- | --- |
| `containerkit.ring_buffer` | `RingBuffer`, a fixed-capacity circular buffer of unsigned 64-bit integers |
| `containerkit.pqueue` | `PriorityQueue`, a binary max-heap ordered by a comparator function |
| `containerkit.linkedlist` | `LinkedList`, a doubly linked list |
| `containerkit.listiter` | `ListIterator` and `ListDescendingIterator`, which edit a `LinkedList` while walking it |
| `containerkit.listzip` | `ListZipIterator`, which walks two linked lists in lock step and edits both |
| `containerkit.queue` | `Queue`, `QueueIterator` and `QueueZipIterator` |
| `containerkit.errors` | the exceptions raised by all of the above |

## Installation

```
pip install containerkit
```

## Ring buffer

`RingBuffer(capacity=10)` keeps a fixed number of slots. `enqueue` never
fails: once the buffer is full it overwrites the oldest slot. Values are
stored as unsigned 64-bit integers, so larger or negative values wrap.
`dequeue` raises `OutOfRangeError` when the buffer is empty, and
`peek(index)` returns the raw contents of a slot by its position in the
underlying storage (not by age).

```python
from containerkit.ring_buffer import RingBuffer

buf = RingBuffer(3)
for item in (1, 2, 3, 4):
    buf.enqueue(item)
buf.dequeue()   # 2 -- the oldest item was overwritten
len(buf)        # 2
buf.peek(0)     # 4
```

## Priority queue

`PriorityQueue(cmp=None, capacity=8, exp_factor=2.0)` pops the element that
`cmp` ranks highest. `cmp(a, b)` returns a positive number when `a` comes
first; without one, elements are compared with `<` and `>`. The capacity
grows by `exp_factor` when the queue is full (a factor of 1 or less falls
back to 2); `capacity()` reports the current value. `top()` and `pop()` raise
`OutOfRangeError` on an empty queue.

```python
from containerkit.pqueue import PriorityQueue

def by_value(a, b):
    return (a > b) - (a < b)

pq = PriorityQueue(by_value)
for n in (5, 1, 9, 3):
    pq.push(n)
pq.top()   # 9
pq.pop()   # 9
pq.pop()   # 5
```

## Linked list

`LinkedList(iterable=None)` supports insertion at either end or at an index
(`add`, `add_first`, `add_last`, `add_at`), bulk insertion of copies
(`add_all`, `add_all_at`), moving every node out of another list
(`splice`, `splice_at`, which leave the other list empty), removal
(`remove`, `remove_at`, `remove_first`, `remove_last`, `remove_all`),
`replace_at`, access (`first`, `last`, `get_at`), `reverse`,
`sublist(begin, end)` with an inclusive end, `copy`, `deepcopy`, `to_list`,
`filter` and `filter_mut`, and two sorts: `sort` rewrites the node contents,
`sort_in_place` is a stable merge sort that relinks the nodes.

Note how elements are matched:

- `remove(element)` and `contains(element)` match by identity (`is`).
- `contains_value(element, cmp=None)` and `index_of(element, cmp=None)`
  match when `cmp(item, element) == 0`, or by `==` when no comparator is given.

Some operations refuse an empty list: `to_list` and `sort` raise
`InvalidRangeError`, `filter` and `filter_mut` raise `OutOfRangeError`, and
`remove_all` raises `ValueNotFoundError`.

```python
from containerkit.linkedlist import LinkedList

lst = LinkedList([4, 1, 3])
lst.add_first(2)
lst.sort_in_place()
lst.to_list()          # [1, 2, 3, 4]
lst.sublist(1, 2).to_list()   # [2, 3]
list(reversed(lst))    # [4, 3, 2, 1]
```

### Editing while iterating

`ListIterator` walks head to tail; `ListDescendingIterator` walks tail to
head. Both offer `remove()` and `replace(element)` for the element last
returned, `add(element)` to insert next to it, and `index()` for its
position. Elements inserted with `add` are not visited.

```python
from containerkit.linkedlist import LinkedList
from containerkit.listiter import ListIterator

lst = LinkedList([1, 2, 3, 4])
it = ListIterator(lst)
for value in it:
    if value == 3:
        it.add(32)      # inserted right after 3
lst.to_list()           # [1, 2, 3, 32, 4]
```

`ListZipIterator(first, second)` yields pairs until either list runs out and
can `add`, `remove` or `replace` a pair in both lists at once.

```python
from containerkit.linkedlist import LinkedList
from containerkit.listzip import ListZipIterator

letters = LinkedList(["a", "b", "c"])
others = LinkedList(["e", "f", "g"])
zip_it = ListZipIterator(letters, others)
for left, right in zip_it:
    if left == "b":
        zip_it.remove()
letters.to_list(), others.to_list()   # (['a', 'c'], ['e', 'g'])
```

## Queue

`Queue(iterable=None)` is first in, first out: `enqueue` adds to the back,
`peek` and `poll` read the front and raise `OutOfRangeError` when the queue
is empty. Iterating a queue (directly, with `foreach`, or with
`QueueIterator`) yields the most recently enqueued element first.
`QueueIterator.replace` and `QueueZipIterator.replace` overwrite the element
or pair last returned.

```python
from containerkit.queue import Queue

q = Queue([1, 2, 3])
q.enqueue(4)
q.peek()   # 1
q.poll()   # 1
len(q)     # 3
list(q)    # [4, 3, 2]
```

## Errors

Every exception derives from `containerkit.errors.CollectionError` and also
from the matching built-in type: `OutOfRangeError` (`IndexError`),
`ValueNotFoundError` (`LookupError`), `InvalidRangeError` and
`InvalidCapacityError` (`ValueError`), and `MaxCapacityError`
(`OverflowError`).

## What it does not provide

The package has no deque, stack, dynamic-array, hash or tree containers of
its own, the queue iterators cannot insert or remove elements, and none of
the containers are safe to share between threads without outside locking.

## Running the tests

```
pip install containerkit[test]
pytest
```