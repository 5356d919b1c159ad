"""An abstract driver interface and a FIFO-backed driver fed by interrupts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Optional


class DriverAPI(ABC):
    """What an application needs from a driver, independent of the hardware.

    A driver is also a context manager that is started on entry and stopped
    on exit.
    """

    @abstractmethod
    def start(self) -> None:
        """Bring the device up and enable its interrupts."""

    @abstractmethod
    def stop(self) -> None:
        """Shut the device down."""

    @abstractmethod
    def read(self) -> Optional[Any]:
        """Return the next received value, or None when nothing is waiting."""

    def __enter__(self) -> "DriverAPI":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


class FifoDriver(DriverAPI):
    """A driver whose interrupt handler queues received values for the application."""

    def __init__(self) -> None:
        self._fifo: deque[Any] = deque()
        self.running = False

    def start(self) -> None:
        """Mark the device as running."""
        self.running = True

    def stop(self) -> None:
        """Mark the device as stopped."""
        self.running = False

    def read(self) -> Optional[Any]:
        """Take the oldest received value, or None when the FIFO is empty."""
        if not self._fifo:
            return None
        return self._fifo.popleft()

    def isr_push(self, value: Any) -> None:
        """Queue a value as the interrupt handler does on reception."""
        self._fifo.append(value)