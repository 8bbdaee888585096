"""Container data structures: ring buffer, priority queue, doubly linked list with editing iterators, and FIFO queue."""

__version__ = "0.1.0"