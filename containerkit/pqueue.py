"""A binary-heap priority queue ordered by a comparator function."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .errors import InvalidCapacityError, MaxCapacityError, OutOfRangeError

DEFAULT_CAPACITY = 8
DEFAULT_EXPANSION_FACTOR = 2.0
MAX_ELEMENTS = 2**64 - 2

Comparator = Callable[[Any, Any], int]


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _parent(i: int) -> int:
    return (i - 1) // 2


class PriorityQueue:
    """Max-heap: the element ranked highest by ``cmp`` comes out first.

    ``cmp(a, b)`` returns a positive number when ``a`` has the higher
    priority, zero when they are equal and a negative number otherwise.
    """

    def __init__(
        self,
        cmp: Optional[Comparator] = None,
        capacity: int = DEFAULT_CAPACITY,
        exp_factor: float = DEFAULT_EXPANSION_FACTOR,
    ) -> None:
        factor = DEFAULT_EXPANSION_FACTOR if exp_factor <= 1 else exp_factor
        if capacity <= 0 or factor >= MAX_ELEMENTS // capacity:
            raise InvalidCapacityError(
                f"capacity {capacity} with expansion factor {factor} is unusable"
            )
        self._cmp = cmp if cmp is not None else _natural_order
        self._capacity = capacity
        self._exp_factor = factor
        self._heap: list[Any] = []

    def capacity(self) -> int:
        """Return the number of elements the queue can hold before growing."""
        return self._capacity

    def _expand(self) -> None:
        if self._capacity == MAX_ELEMENTS:
            raise MaxCapacityError("priority queue is at maximum capacity")
        new_capacity = int(self._capacity * self._exp_factor)
        if new_capacity <= self._capacity or new_capacity > MAX_ELEMENTS:
            self._capacity = MAX_ELEMENTS
        else:
            self._capacity = new_capacity

    def push(self, element: Any) -> None:
        """Insert ``element``, growing the capacity if the queue is full."""
        i = len(self._heap)
        if i >= self._capacity:
            self._expand()
        heap = self._heap
        heap.append(element)
        while i != 0 and self._cmp(heap[i], heap[_parent(i)]) > 0:
            p = _parent(i)
            heap[i], heap[p] = heap[p], heap[i]
            i = p

    def top(self) -> Any:
        """Return the highest-priority element without removing it."""
        if not self._heap:
            raise OutOfRangeError("top of an empty priority queue")
        return self._heap[0]

    def pop(self) -> Any:
        """Remove and return the highest-priority element."""
        heap = self._heap
        if not heap:
            raise OutOfRangeError("pop from an empty priority queue")
        heap[0], heap[-1] = heap[-1], heap[0]
        element = heap.pop()
        self._heapify(0)
        return element

    def _heapify(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while size > 1:
            left = 2 * index + 1
            right = 2 * index + 2
            if left >= size or right >= size:
                return
            best = index
            if self._cmp(heap[best], heap[left]) < 0:
                best = left
            if self._cmp(heap[best], heap[right]) < 0:
                best = right
            if best == index:
                return
            heap[index], heap[best] = heap[best], heap[index]
            index = best

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)}, capacity={self._capacity})"