"""A blocking task that can be cancelled, and a priority scheduler with delays."""

from __future__ import annotations

import heapq
import threading
import time
from datetime import timedelta
from itertools import count
from typing import Any, Callable, Union

Delay = Union[float, int, timedelta]


class CancellableTask:
    """A task that blocks for up to ``timeout`` seconds unless it is cancelled.

    ``cancel`` may be called from another thread; it wakes the blocked
    ``run`` at once.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        if timeout < 0:
            raise ValueError("timeout must not be negative")
        self.timeout = timeout
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        """Whether ``cancel`` has been called."""
        return self._cancelled.is_set()

    def run(self) -> bool:
        """Block until cancelled or timed out; True when it ended by cancellation."""
        return self._cancelled.wait(self.timeout)

    def cancel(self) -> None:
        """Signal the task to stop and wake it if it is waiting."""
        self._cancelled.set()


def _seconds(delay: Delay) -> float:
    if isinstance(delay, timedelta):
        return delay.total_seconds()
    return float(delay)


class TaskScheduler:
    """Runs ready tasks highest priority first; delayed tasks join the ready
    set once their wake time has passed.

    Tasks of equal priority run in the order they became ready.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._seq = count()
        self._ready: list[tuple[int, int, Callable[[], Any]]] = []
        self._delayed: list[tuple[float, int, int, Callable[[], Any]]] = []

    def __len__(self) -> int:
        return len(self._ready) + len(self._delayed)

    def add_task(self, priority: int, func: Callable[[], Any]) -> None:
        """Queue ``func`` to run as soon as possible at ``priority``."""
        heapq.heappush(self._ready, (-priority, next(self._seq), func))

    def run_task_after(self, delay: Delay, priority: int, func: Callable[[], Any]) -> None:
        """Queue ``func`` to become ready after ``delay`` (seconds or timedelta)."""
        wake = self._clock() + _seconds(delay)
        heapq.heappush(self._delayed, (wake, next(self._seq), priority, func))

    def run(self) -> list[Any]:
        """Run every queued task and return their results in execution order."""
        results: list[Any] = []
        while self._ready or self._delayed:
            now = self._clock()
            while self._delayed and self._delayed[0][0] <= now:
                _, _, priority, func = heapq.heappop(self._delayed)
                self.add_task(priority, func)
            if self._ready:
                _, _, func = heapq.heappop(self._ready)
                results.append(func())
            elif self._delayed:
                self._sleep(max(0.0, self._delayed[0][0] - now))
        return results