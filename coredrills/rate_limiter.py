"""A thread-safe sliding-window-log rate limiter."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from datetime import timedelta
from typing import Callable, Union

logger = logging.getLogger(__name__)

Window = Union[float, int, timedelta]


class RateLimiter:
    """Allows at most ``max_requests`` requests in any ``window`` seconds.

    The arrival time of every allowed request is logged; entries at or
    before ``now - window`` fall out of the log before each decision.
    Denied requests are not logged.
    """

    def __init__(
        self,
        max_requests: int,
        window: Window = 1,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 0:
            raise ValueError("max_requests must not be negative")
        seconds = window.total_seconds() if isinstance(window, timedelta) else float(window)
        if seconds <= 0:
            raise ValueError("window must be positive")
        self.max_requests = max_requests
        self.window = seconds
        self._clock = clock
        self._requests: deque[float] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        """Requests currently counted in the window log."""
        with self._lock:
            return len(self._requests)

    def should_allow(self, request_id: str) -> bool:
        """Record and allow the request when the window has room; else deny it."""
        with self._lock:
            now = self._clock()
            cutoff = now - self.window
            while self._requests and self._requests[0] <= cutoff:
                self._requests.popleft()
            if len(self._requests) < self.max_requests:
                self._requests.append(now)
                logger.debug(
                    "Request %s allowed. Window count: %d", request_id, len(self._requests)
                )
                return True
            logger.debug(
                "Request %s denied. Window count: %d", request_id, len(self._requests)
            )
            return False