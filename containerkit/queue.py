"""A first-in first-out queue with iterators that can replace elements."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable, Iterator, Optional

from .errors import OutOfRangeError


class Queue:
    """FIFO queue backed by a double-ended buffer.

    New elements go in at the front of the buffer and leave from the back.
    Iteration walks the buffer front to back, so it yields the most
    recently enqueued element first and the next one to be polled last.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: deque[Any] = deque()
        if iterable is not None:
            for element in iterable:
                self.enqueue(element)

    def enqueue(self, element: Any) -> None:
        """Add ``element`` to the back of the queue."""
        self._items.appendleft(element)

    def peek(self) -> Any:
        """Return the element at the front of the queue without removing it."""
        if not self._items:
            raise OutOfRangeError("peek at an empty queue")
        return self._items[-1]

    def poll(self) -> Any:
        """Remove and return the element at the front of the queue."""
        if not self._items:
            raise OutOfRangeError("poll from an empty queue")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def foreach(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every element in iteration order."""
        for element in self._items:
            fn(element)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class QueueIterator:
    """Iterates over a Queue and can replace the element it last returned."""

    def __init__(self, queue: Queue) -> None:
        self._items = queue._items
        self._index = 0
        self._last: Optional[int] = None

    def __iter__(self) -> "QueueIterator":
        return self

    def __next__(self) -> Any:
        if self._index >= len(self._items):
            raise StopIteration
        element = self._items[self._index]
        self._last = self._index
        self._index += 1
        return element

    def replace(self, replacement: Any) -> Any:
        """Replace the last returned element and return the old one."""
        if self._last is None:
            raise OutOfRangeError("no element has been returned yet")
        old = self._items[self._last]
        self._items[self._last] = replacement
        return old


class QueueZipIterator:
    """Iterates over two Queues in lock step until either is exhausted."""

    def __init__(self, first: Queue, second: Queue) -> None:
        self._first = first._items
        self._second = second._items
        self._index = 0
        self._last: Optional[int] = None

    def __iter__(self) -> "QueueZipIterator":
        return self

    def __next__(self) -> tuple[Any, Any]:
        i = self._index
        if i >= len(self._first) or i >= len(self._second):
            raise StopIteration
        pair = (self._first[i], self._second[i])
        self._last = i
        self._index += 1
        return pair

    def replace(self, first_element: Any, second_element: Any) -> tuple[Any, Any]:
        """Replace the last returned pair and return the old pair."""
        if self._last is None:
            raise OutOfRangeError("no pair has been returned yet")
        i = self._last
        old = (self._first[i], self._second[i])
        self._first[i] = first_element
        self._second[i] = second_element
        return old