"""A fixed-capacity ring buffer of unsigned 64-bit integers."""

from __future__ import annotations

from .errors import InvalidCapacityError, OutOfRangeError

DEFAULT_CAPACITY = 10

_UINT64_MASK = (1 << 64) - 1


class RingBuffer:
    """Ring buffer that overwrites its oldest slot once it is full.

    Items are stored as unsigned 64-bit integers; larger values wrap.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise InvalidCapacityError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._slots = [0] * capacity
        self._size = 0
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the buffer."""
        return self._capacity

    def enqueue(self, item: int) -> None:
        """Write ``item`` at the head, advancing past the oldest slot if needed."""
        if self._head == self._tail:
            self._tail = (self._tail + 1) % self._capacity
        self._slots[self._head] = int(item) & _UINT64_MASK
        self._head = (self._head + 1) % self._capacity
        if self._size < self._capacity:
            self._size += 1

    def dequeue(self) -> int:
        """Remove and return the item at the tail.

        Raises OutOfRangeError if the buffer is empty.
        """
        if self.is_empty():
            raise OutOfRangeError("dequeue from an empty ring buffer")
        item = self._slots[self._tail]
        self._tail = (self._tail + 1) % self._capacity
        self._size -= 1
        return item

    def is_empty(self) -> bool:
        """Return True if the buffer holds no items."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def peek(self, index: int) -> int:
        """Return the raw contents of slot ``index`` without removing it."""
        if not 0 <= index < self._capacity:
            raise OutOfRangeError(
                f"slot {index} outside a buffer of capacity {self._capacity}"
            )
        return self._slots[index]

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self._capacity}, size={self._size})"