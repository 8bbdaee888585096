"""Lock-step iteration over two LinkedLists that can modify both lists."""

from __future__ import annotations

from typing import Any, Optional

from .errors import ValueNotFoundError
from .linkedlist import LinkedList, _Node


class ListZipIterator:
    """Walks two LinkedLists side by side from head to tail.

    Iteration stops as soon as either list is exhausted. The pair most
    recently returned by ``next()`` can be removed from both lists or
    replaced in both lists. A new pair can be inserted right after it.
    Pairs inserted this way are not visited by the iterator.
    """

    def __init__(self, first: LinkedList, second: LinkedList) -> None:
        self._first = first
        self._second = second
        self._index = 0
        self._first_last: Optional[_Node] = None
        self._second_last: Optional[_Node] = None
        self._first_next: Optional[_Node] = first._head
        self._second_next: Optional[_Node] = second._head

    def __iter__(self) -> "ListZipIterator":
        return self

    def __next__(self) -> tuple[Any, Any]:
        node1 = self._first_next
        node2 = self._second_next
        if node1 is None or node2 is None:
            raise StopIteration
        self._first_last = node1
        self._second_last = node2
        self._first_next = node1.next
        self._second_next = node2.next
        self._index += 1
        return node1.data, node2.data

    def _require_last(self) -> tuple[_Node, _Node]:
        if self._first_last is None or self._second_last is None:
            raise ValueNotFoundError("no pair has been returned since the last removal")
        return self._first_last, self._second_last

    def add(self, first_element: Any, second_element: Any) -> None:
        """Insert a pair directly after the last returned pair."""
        base1, base2 = self._require_last()
        self._first._link_after(base1, _Node(first_element))
        self._second._link_after(base2, _Node(second_element))
        self._index += 1

    def remove(self) -> tuple[Any, Any]:
        """Remove the last returned pair from both lists and return it."""
        node1, node2 = self._require_last()
        self._first_last = None
        self._second_last = None
        self._index -= 1
        return self._first._unlink(node1), self._second._unlink(node2)

    def replace(self, first_element: Any, second_element: Any) -> tuple[Any, Any]:
        """Replace the last returned pair and return the old pair."""
        node1, node2 = self._require_last()
        old = (node1.data, node2.data)
        node1.data = first_element
        node2.data = second_element
        return old

    def index(self) -> int:
        """Return the position of the last returned pair."""
        return self._index - 1