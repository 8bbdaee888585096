"""A doubly linked list with positional insertion, splicing and sorting."""

from __future__ import annotations

import copy as _copy
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, Optional

from .errors import InvalidRangeError, OutOfRangeError, ValueNotFoundError

Comparator = Callable[[Any, Any], int]


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _matches(item: Any, element: Any, cmp: Optional[Comparator]) -> bool:
    """Tell whether ``item`` matches ``element``, by ``cmp`` or by equality."""
    if cmp is None:
        return item == element
    return cmp(item, element) == 0


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


def _make_chain(items: Iterable[Any]) -> tuple[Optional[_Node], Optional[_Node], int]:
    """Link fresh nodes for ``items``; return (head, tail, count)."""
    head: Optional[_Node] = None
    tail: Optional[_Node] = None
    count = 0
    for item in items:
        node = _Node(item)
        if tail is None:
            head = node
        else:
            tail.next = node
            node.prev = tail
        tail = node
        count += 1
    return head, tail, count


def _merge(left: Optional[_Node], right: Optional[_Node], cmp: Comparator) -> Optional[_Node]:
    anchor = _Node(None)
    end = anchor
    while left is not None and right is not None:
        if cmp(left.data, right.data) <= 0:
            end.next = left
            left = left.next
        else:
            end.next = right
            right = right.next
        end = end.next
    end.next = left if left is not None else right
    return anchor.next


def _sort_chain(head: Optional[_Node], length: int, cmp: Comparator) -> Optional[_Node]:
    """Stable merge sort of a ``next``-linked chain of ``length`` nodes."""
    if length < 2:
        return head
    half = length // 2
    mid = head
    for _ in range(half - 1):
        mid = mid.next
    right = mid.next
    mid.next = None
    left_sorted = _sort_chain(head, half, cmp)
    right_sorted = _sort_chain(right, length - half, cmp)
    return _merge(left_sorted, right_sorted, cmp)


class LinkedList:
    """Doubly linked list of arbitrary Python objects.

    ``contains`` and ``remove`` match elements by identity; the ``*_value``
    and ``index_of`` lookups compare values through a comparator.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        if iterable is not None:
            for element in iterable:
                self.add_last(element)

    # -- internal node operations -------------------------------------

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._size:
            raise OutOfRangeError(f"index {index} outside a list of size {self._size}")
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _unlink(self, node: _Node) -> Any:
        """Detach ``node`` from the list and return its data."""
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1
        return node.data

    def _link_after(self, base: _Node, node: _Node) -> None:
        """Insert ``node`` directly after ``base``, updating size and tail."""
        node.prev = base
        node.next = base.next
        if base.next is None:
            self._tail = node
        else:
            base.next.prev = node
        base.next = node
        self._size += 1

    def _link_before(self, base: _Node, node: _Node) -> None:
        """Insert ``node`` directly before ``base``, updating size and head."""
        node.next = base
        node.prev = base.prev
        if base.prev is None:
            self._head = node
        else:
            base.prev.next = node
        base.prev = node
        self._size += 1

    def _insert_chain(self, head: Optional[_Node], tail: Optional[_Node], count: int, index: int) -> None:
        if count == 0:
            return
        if self._size == 0:
            self._head, self._tail = head, tail
        elif index == self._size:
            self._tail.next = head
            head.prev = self._tail
            self._tail = tail
        else:
            right = self._node_at(index)
            left = right.prev
            tail.next = right
            right.prev = tail
            head.prev = left
            if left is None:
                self._head = head
            else:
                left.next = head
        self._size += count

    # -- insertion ----------------------------------------------------

    def add(self, element: Any) -> None:
        """Append ``element`` to the end of the list."""
        self.add_last(element)

    def add_first(self, element: Any) -> None:
        """Prepend ``element``, making it the new head."""
        node = _Node(element)
        if self._head is None:
            self._head = self._tail = node
            self._size += 1
        else:
            self._link_before(self._head, node)

    def add_last(self, element: Any) -> None:
        """Append ``element``, making it the new tail."""
        node = _Node(element)
        if self._tail is None:
            self._head = self._tail = node
            self._size += 1
        else:
            self._link_after(self._tail, node)

    def add_at(self, element: Any, index: int) -> None:
        """Insert ``element`` at an existing ``index``, shifting later elements."""
        base = self._node_at(index)
        self._link_before(base, _Node(element))

    def add_all(self, other: Iterable[Any]) -> None:
        """Append every element of ``other`` to this list."""
        self.add_all_at(other, self._size)

    def add_all_at(self, other: Iterable[Any], index: int) -> None:
        """Insert copies of ``other``'s elements starting at ``index`` (0..len)."""
        head, tail, count = _make_chain(list(other))
        if count == 0:
            return
        if not 0 <= index <= self._size:
            raise OutOfRangeError(f"index {index} outside 0..{self._size}")
        self._insert_chain(head, tail, count, index)

    def splice(self, other: "LinkedList") -> None:
        """Move every element of ``other`` to the end of this list."""
        self.splice_at(other, self._size)

    def splice_at(self, other: "LinkedList", index: int) -> None:
        """Move every element of ``other`` into this list at ``index``, emptying it."""
        if other._size == 0:
            return
        if not 0 <= index <= self._size:
            raise OutOfRangeError(f"index {index} outside 0..{self._size}")
        if other is self:
            raise ValueError("cannot splice a list into itself")
        self._insert_chain(other._head, other._tail, other._size, index)
        other._head = None
        other._tail = None
        other._size = 0

    # -- removal ------------------------------------------------------

    def remove(self, element: Any) -> Any:
        """Remove the first occurrence of this very object and return it."""
        for node in self._nodes():
            if node.data is element:
                return self._unlink(node)
        raise ValueNotFoundError("element not in list")

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        return self._unlink(self._node_at(index))

    def remove_first(self) -> Any:
        """Remove and return the head element."""
        if self._head is None:
            raise ValueNotFoundError("remove from an empty list")
        return self._unlink(self._head)

    def remove_last(self) -> Any:
        """Remove and return the tail element."""
        if self._tail is None:
            raise ValueNotFoundError("remove from an empty list")
        return self._unlink(self._tail)

    def remove_all(self, callback: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, passing each to ``callback`` first if given."""
        if self._size == 0:
            raise ValueNotFoundError("list is already empty")
        for node in self._nodes():
            if callback is not None:
                callback(node.data)
            self._unlink(node)
        self._head = None
        self._tail = None

    def replace_at(self, element: Any, index: int) -> Any:
        """Replace the element at ``index`` and return the old one."""
        node = self._node_at(index)
        old, node.data = node.data, element
        return old

    # -- access -------------------------------------------------------

    def first(self) -> Any:
        """Return the head element."""
        if self._head is None:
            raise ValueNotFoundError("empty list has no first element")
        return self._head.data

    def last(self) -> Any:
        """Return the tail element."""
        if self._tail is None:
            raise ValueNotFoundError("empty list has no last element")
        return self._tail.data

    def get_at(self, index: int) -> Any:
        """Return the element at ``index``."""
        return self._node_at(index).data

    # -- whole-list operations ---------------------------------------

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        for node in self._nodes():
            node.prev, node.next = node.next, node.prev
        self._head, self._tail = self._tail, self._head

    def sublist(self, begin: int, end: int) -> "LinkedList":
        """Return a new list of the elements from ``begin`` to ``end`` inclusive."""
        if begin < 0 or begin > end or end >= self._size:
            raise InvalidRangeError(f"invalid range {begin}..{end} for size {self._size}")
        result = LinkedList()
        node = self._node_at(begin)
        for _ in range(end - begin + 1):
            result.add_last(node.data)
            node = node.next
        return result

    def copy(self) -> "LinkedList":
        """Return a shallow copy sharing the same element objects."""
        return LinkedList(self)

    def deepcopy(self, copier: Optional[Callable[[Any], Any]] = None) -> "LinkedList":
        """Return a copy whose elements are produced by ``copier``."""
        make = copier if copier is not None else _copy.deepcopy
        return LinkedList(make(element) for element in self)

    def to_list(self) -> list[Any]:
        """Return the elements as a Python list."""
        if self._size == 0:
            raise InvalidRangeError("cannot convert an empty list")
        return list(self)

    def contains(self, element: Any) -> int:
        """Count the occurrences of this very object."""
        return sum(1 for item in self if item is element)

    def contains_value(self, element: Any, cmp: Optional[Comparator] = None) -> int:
        """Count the elements for which ``cmp(item, element) == 0``."""
        return sum(1 for item in self if _matches(item, element, cmp))

    def index_of(self, element: Any, cmp: Optional[Comparator] = None) -> int:
        """Return the index of the first element equal to ``element``."""
        for index, item in enumerate(self):
            if _matches(item, element, cmp):
                return index
        raise OutOfRangeError("element not in list")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def sort(self, cmp: Optional[Comparator] = None) -> None:
        """Sort the elements by ``cmp``, rewriting node contents."""
        if self._size == 0:
            raise InvalidRangeError("cannot sort an empty list")
        compare = cmp if cmp is not None else _natural_order
        ordered = sorted(self, key=cmp_to_key(compare))
        for node, value in zip(self._nodes(), ordered):
            node.data = value

    def sort_in_place(self, cmp: Optional[Comparator] = None) -> None:
        """Stable merge sort that relinks the nodes themselves."""
        if self._size < 2:
            return
        compare = cmp if cmp is not None else _natural_order
        head = _sort_chain(self._head, self._size, compare)
        prev: Optional[_Node] = None
        node = head
        while node is not None:
            node.prev = prev
            prev = node
            node = node.next
        self._head = head
        self._tail = prev

    def filter_mut(self, predicate: Callable[[Any], bool]) -> None:
        """Remove every element for which ``predicate`` is false."""
        if self._size == 0:
            raise OutOfRangeError("cannot filter an empty list")
        for node in self._nodes():
            if not predicate(node.data):
                self._unlink(node)

    def filter(self, predicate: Callable[[Any], bool]) -> "LinkedList":
        """Return a new list of the elements for which ``predicate`` is true."""
        if self._size == 0:
            raise OutOfRangeError("cannot filter an empty list")
        return LinkedList(item for item in self if predicate(item))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"