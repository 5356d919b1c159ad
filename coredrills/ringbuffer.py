"""Fixed-capacity FIFO ring buffers for single-producer/single-consumer use."""

from __future__ import annotations

import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class UartTx:
    """A UART transmit FIFO that drops new characters when it is full.

    One slot is kept free to tell a full buffer from an empty one, so a
    buffer of ``capacity`` slots holds at most ``capacity - 1`` characters.
    Every rejected character is counted in ``dropped``.
    """

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 2:
            raise ValueError("a UART buffer needs at least two slots")
        self._capacity = capacity
        self._buf = [""] * capacity
        self._head = 0  # next slot to write
        self._tail = 0  # next slot to read
        self.dropped = 0
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        """Number of slots, one more than the characters it can hold."""
        return self._capacity

    def _is_full(self) -> bool:
        return (self._head + 1) % self._capacity == self._tail

    def _is_empty(self) -> bool:
        return self._head == self._tail

    @staticmethod
    def _check_char(char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")

    def _store(self, char: str) -> None:
        self._buf[self._head] = char
        self._head = (self._head + 1) % self._capacity
        self._cond.notify_all()

    def write_nonblocking(self, char: str) -> bool:
        """Queue ``char``; return False and count a drop when the buffer is full."""
        self._check_char(char)
        with self._cond:
            if self._is_full():
                self.dropped += 1
                return False
            self._store(char)
            return True

    def write_blocking(self, char: str) -> None:
        """Queue ``char``, waiting until the consumer makes room for it."""
        self._check_char(char)
        with self._cond:
            self._cond.wait_for(lambda: not self._is_full())
            self._store(char)

    def read(self) -> Optional[str]:
        """Take the oldest character, or return None when nothing is queued."""
        with self._cond:
            if self._is_empty():
                return None
            char = self._buf[self._tail]
            self._tail = (self._tail + 1) % self._capacity
            self._cond.notify_all()
            return char

    def empty(self) -> bool:
        """Tell whether no character is queued."""
        with self._cond:
            return self._is_empty()

    def full(self) -> bool:
        """Tell whether the next write would be dropped."""
        with self._cond:
            return self._is_full()


class Ring(Generic[T]):
    """A ring whose slot count is a power of two, indexed with a bit mask.

    The head and tail are free-running counters; only their masked values
    select slots. One slot stays free, so the ring holds ``capacity - 1`` items.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0 or capacity & (capacity - 1):
            raise ValueError(f"capacity {capacity} is not a positive power of two")
        self._capacity = capacity
        self._mask = capacity - 1
        self._buf: list[Optional[T]] = [None] * capacity
        self._head = 0  # producer: next write
        self._tail = 0  # consumer: next read

    @property
    def capacity(self) -> int:
        """Number of slots in the ring."""
        return self._capacity

    def __len__(self) -> int:
        return (self._head - self._tail) & self._mask

    def empty(self) -> bool:
        """Tell whether the ring holds no item."""
        return (self._head & self._mask) == (self._tail & self._mask)

    def full(self) -> bool:
        """Tell whether the next push would be refused."""
        return ((self._head + 1) & self._mask) == (self._tail & self._mask)

    def clear(self) -> None:
        """Discard every queued item; only call while nobody else uses the ring."""
        self._tail = self._head

    def push(self, item: T) -> bool:
        """Append ``item``; return False when the ring is full."""
        if self.full():
            return False
        self._buf[self._head & self._mask] = item
        # The slot is written before the head is published.
        self._head += 1
        return True

    def pop(self) -> T:
        """Remove and return the oldest item; raise IndexError when empty."""
        if self.empty():
            raise IndexError("pop from an empty ring")
        slot = self._tail & self._mask
        item = self._buf[slot]
        self._buf[slot] = None
        self._tail += 1
        return item  # type: ignore[return-value]


class InterruptSafeRingBuffer(Generic[T]):
    """A ring that holds exactly ``capacity`` items, using ``capacity + 1`` slots.

    A single writer advances the tail and a single reader advances the head;
    ``read`` returns None when nothing is waiting.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._buf: list[Optional[T]] = [None] * (capacity + 1)
        self._head = 0  # advanced by the reader
        self._tail = 0  # advanced by the writer

    @property
    def capacity(self) -> int:
        """Number of items the buffer can hold."""
        return self._capacity

    def write(self, item: T) -> bool:
        """Store ``item``; return False when the buffer is full."""
        current = self._tail
        following = (current + 1) % len(self._buf)
        if following == self._head:
            return False
        self._buf[current] = item
        self._tail = following
        return True

    def read(self) -> Optional[T]:
        """Take the oldest item, or return None when the buffer is empty."""
        current = self._head
        if current == self._tail:
            return None
        item = self._buf[current]
        self._buf[current] = None
        self._head = (current + 1) % len(self._buf)
        return item