"""A fixed-capacity FIFO queue backed by a preallocated circular array."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class FixedQueue(Generic[T]):
    """A queue that never grows past ``capacity`` items.

    Pushing onto a full queue is refused rather than overwriting old items.
    All operations are O(1) and no storage is allocated after construction.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("FixedQueue capacity must be > 0")
        self._capacity = capacity
        self._buf: list[Optional[T]] = [None] * capacity
        self._head = 0  # next slot to read
        self._tail = 0  # next slot to write
        self._count = 0

    @property
    def capacity(self) -> int:
        """Maximum number of items the queue holds."""
        return self._capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate over the queued items from oldest to newest."""
        for offset in range(self._count):
            yield self._buf[(self._head + offset) % self._capacity]  # type: ignore[misc]

    def empty(self) -> bool:
        """Tell whether the queue holds no item."""
        return self._count == 0

    def full(self) -> bool:
        """Tell whether the queue is at capacity."""
        return self._count == self._capacity

    def push(self, item: T) -> bool:
        """Append ``item``; return False, leaving the queue unchanged, when full."""
        if self.full():
            return False
        self._buf[self._tail] = item
        self._tail = (self._tail + 1) % self._capacity
        self._count += 1
        return True

    def pop(self) -> T:
        """Remove and return the oldest item; raise IndexError when empty."""
        if self.empty():
            raise IndexError("pop from an empty queue")
        item = self._buf[self._head]
        self._buf[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        return item  # type: ignore[return-value]

    def front(self) -> T:
        """The oldest item; raise IndexError when empty."""
        if self.empty():
            raise IndexError("front of an empty queue")
        return self._buf[self._head]  # type: ignore[return-value]

    def back(self) -> T:
        """The newest item; raise IndexError when empty."""
        if self.empty():
            raise IndexError("back of an empty queue")
        return self._buf[(self._tail - 1) % self._capacity]  # type: ignore[return-value]