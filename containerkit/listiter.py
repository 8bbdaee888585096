"""Iterators over a LinkedList that can modify the list as they go."""

from __future__ import annotations

from typing import Any, Optional

from .errors import ValueNotFoundError
from .linkedlist import LinkedList, _Node


class ListIterator:
    """Walks a LinkedList from head to tail.

    The element most recently returned by ``next()`` can be removed or
    replaced. New elements can be inserted right after it. Elements
    inserted this way are not visited by the iterator.
    """

    def __init__(self, lst: LinkedList) -> None:
        self._list = lst
        self._index = 0
        self._last: Optional[_Node] = None
        self._next: Optional[_Node] = lst._head

    def __iter__(self) -> "ListIterator":
        return self

    def __next__(self) -> Any:
        node = self._next
        if node is None:
            raise StopIteration
        self._last = node
        self._next = node.next
        self._index += 1
        return node.data

    def _require_last(self) -> _Node:
        if self._last is None:
            raise ValueNotFoundError("no element has been returned since the last removal")
        return self._last

    def remove(self) -> Any:
        """Remove the last returned element from the list and return it."""
        node = self._require_last()
        self._last = None
        self._index -= 1
        return self._list._unlink(node)

    def add(self, element: Any) -> None:
        """Insert ``element`` directly after the last returned element."""
        base = self._require_last()
        self._list._link_after(base, _Node(element))
        self._index += 1

    def replace(self, element: Any) -> Any:
        """Replace the last returned element and return the old one."""
        node = self._require_last()
        old, node.data = node.data, element
        return old

    def index(self) -> int:
        """Return the list index of the last returned element."""
        return self._index - 1


class ListDescendingIterator:
    """Walks a LinkedList from tail to head.

    The element most recently returned by ``next()`` can be removed or
    replaced. New elements can be inserted right before it in list order,
    which puts them after it in the order of this iterator. Elements
    inserted this way are not visited by the iterator.
    """

    def __init__(self, lst: LinkedList) -> None:
        self._list = lst
        self._index = len(lst)
        self._last: Optional[_Node] = None
        self._next: Optional[_Node] = lst._tail

    def __iter__(self) -> "ListDescendingIterator":
        return self

    def __next__(self) -> Any:
        node = self._next
        if node is None:
            raise StopIteration
        self._last = node
        self._next = node.prev
        self._index -= 1
        return node.data

    def _require_last(self) -> _Node:
        if self._last is None:
            raise ValueNotFoundError("no element has been returned since the last removal")
        return self._last

    def remove(self) -> Any:
        """Remove the last returned element from the list and return it."""
        node = self._require_last()
        self._last = None
        return self._list._unlink(node)

    def add(self, element: Any) -> None:
        """Insert ``element`` in front of the last returned element.

        The new element becomes the one that ``remove`` and ``replace``
        act on.
        """
        base = self._require_last()
        node = _Node(element)
        self._list._link_before(base, node)
        self._last = node

    def replace(self, element: Any) -> Any:
        """Replace the last returned element and return the old one."""
        node = self._require_last()
        old, node.data = node.data, element
        return old

    def index(self) -> int:
        """Return the list index of the last returned element."""
        return self._index