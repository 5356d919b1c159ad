"""Thread synchronisation primitives: a counting semaphore, a bounded buffer
and an atomic integer, plus a lock-protected shared counter."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class CountingSemaphore:
    """A counter of available resources built on a condition variable.

    ``wait`` takes one resource, sleeping while none is left; ``post`` gives
    one back and wakes a single waiter.
    """

    def __init__(self, initial_count: int) -> None:
        if initial_count < 0:
            raise ValueError("a semaphore cannot start with a negative count")
        self._count = initial_count
        self._cond = threading.Condition()

    @property
    def count(self) -> int:
        """Resources currently available."""
        with self._cond:
            return self._count

    def wait(self) -> None:
        """Take one resource, blocking until one is available."""
        with self._cond:
            self._cond.wait_for(lambda: self._count > 0)
            self._count -= 1

    def post(self) -> None:
        """Release one resource and wake one waiting thread."""
        with self._cond:
            self._count += 1
            self._cond.notify()


class BoundedBuffer(Generic[T]):
    """A FIFO of at most ``size`` items shared by producers and consumers.

    One semaphore counts the empty slots and one the filled slots; a lock
    guards the queue itself only for the moment it is changed.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self._items: deque[T] = deque()
        self._lock = threading.Lock()
        self._empty_slots = CountingSemaphore(size)
        self._filled_slots = CountingSemaphore(0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def produce(self, item: T) -> None:
        """Add ``item``, blocking while the buffer is full."""
        self._empty_slots.wait()
        with self._lock:
            self._items.append(item)
        self._filled_slots.post()

    def consume(self) -> T:
        """Remove and return the oldest item, blocking while the buffer is empty."""
        self._filled_slots.wait()
        with self._lock:
            item = self._items.popleft()
        self._empty_slots.post()
        return item


class AtomicInt:
    """An integer whose every operation is indivisible across threads."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> int:
        """Current value."""
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        """Replace the value."""
        with self._lock:
            self._value = value

    def exchange(self, value: int) -> int:
        """Replace the value and return the previous one."""
        with self._lock:
            old, self._value = self._value, value
            return old

    def fetch_add(self, amount: int) -> int:
        """Add ``amount`` and return the value from before the addition."""
        with self._lock:
            old = self._value
            self._value = old + amount
            return old

    def compare_exchange(self, expected: int, desired: int) -> tuple[bool, int]:
        """Set ``desired`` if the value equals ``expected``.

        Returns ``(True, expected)`` on success and ``(False, current)`` on
        failure, where ``current`` is the value that was actually found.
        """
        with self._lock:
            if self._value == expected:
                self._value = desired
                return True, expected
            return False, self._value

    def __repr__(self) -> str:
        return f"AtomicInt({self.load()})"


def locked_increment(threads: int, times: int) -> int:
    """Start ``threads`` threads that each add one ``times`` times to a shared
    counter under a mutex, wait for all of them and return the total."""
    if threads < 0 or times < 0:
        raise ValueError("thread count and repetitions must not be negative")
    lock = threading.Lock()
    total = 0

    def worker() -> None:
        nonlocal total
        for _ in range(times):
            with lock:
                total += 1

    workers = [threading.Thread(target=worker) for _ in range(threads)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    return total