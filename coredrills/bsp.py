"""Board support layers that applications drive without touching hardware.

``SimpleBoard`` is a minimal board: a UART writing to a text stream and a
tick counter that advances on every read. ``MockBoard`` runs on a PC with a
non-blocking UART fed through a ring buffer drained by a background thread,
and a timer driven by a monotonic clock.
"""

from __future__ import annotations

import sys
import threading
import time
from typing import Callable, Optional, TextIO

from coredrills.ringbuffer import Ring

MASK32 = 0xFFFFFFFF
DEFAULT_TICK_HZ = 1000
NS_PER_SECOND = 1_000_000_000


class SimpleBoard:
    """A board whose UART prints to a stream and whose timer counts reads."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self._output = output if output is not None else sys.stdout
        self.baud: Optional[int] = None
        self._ticks = 0

    def uart_init(self, baud: int) -> None:
        """Configure the UART speed."""
        if baud <= 0:
            raise ValueError("baud rate must be positive")
        self.baud = baud

    def uart_write(self, text: str) -> None:
        """Send ``text`` out of the UART."""
        self._output.write(text)

    def timer_start(self) -> None:
        """Reset the tick counter to zero."""
        self._ticks = 0

    def timer_ticks(self) -> int:
        """Advance the 32-bit tick counter by one and return it."""
        self._ticks = (self._ticks + 1) & MASK32
        return self._ticks


class MockBoard:
    """A PC-hosted board with a buffered UART and a clock-driven timer.

    ``uart_init`` starts a background thread that plays the part of the UART
    transmit interrupt: it drains the ring buffer one character at a time
    into the output stream. The board is a context manager that stops that
    thread on exit.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        *,
        buffer_size: int = 1024,
        clock: Callable[[], int] = time.monotonic_ns,
        sleep: Callable[[float], None] = time.sleep,
        char_delay: float = 50e-6,
        idle_delay: float = 100e-6,
    ) -> None:
        self._output = output if output is not None else sys.stdout
        self._tx: Ring[str] = Ring(buffer_size)
        self._clock = clock
        self._sleep = sleep
        self._char_delay = char_delay
        self._idle_delay = idle_delay
        self._tick_hz = DEFAULT_TICK_HZ
        self._t0 = clock()
        self._running = threading.Event()
        self._worker: Optional[threading.Thread] = None
        self._tx_lock = threading.Lock()
        self.baud: Optional[int] = None

    @property
    def running(self) -> bool:
        """Whether the transmit thread is active."""
        return self._running.is_set()

    @property
    def tick_hz(self) -> int:
        """Timer frequency in ticks per second."""
        return self._tick_hz

    def __enter__(self) -> "MockBoard":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _start(self) -> None:
        if self._running.is_set():
            return
        self._running.set()
        self._t0 = self._clock()
        self._worker = threading.Thread(target=self._tx_loop, daemon=True)
        self._worker.start()

    def _tx_loop(self) -> None:
        while self._running.is_set():
            with self._tx_lock:
                char = None if self._tx.empty() else self._tx.pop()
                if char is not None:
                    self._output.write(char)
                    if hasattr(self._output, "flush"):
                        self._output.flush()
            time.sleep(self._char_delay if char is not None else self._idle_delay)

    def stop(self) -> None:
        """Stop the transmit thread; characters still queued stay queued."""
        if not self._running.is_set():
            return
        self._running.clear()
        if self._worker is not None:
            self._worker.join()
            self._worker = None

    def uart_init(self, baud: int) -> None:
        """Configure the UART and start transmitting."""
        if baud <= 0:
            raise ValueError("baud rate must be positive")
        self.baud = baud
        self._start()

    def uart_write(self, data: str) -> bool:
        """Queue as much of ``data`` as fits; False when some of it did not."""
        for char in data:
            if not self._tx.push(char):
                return False
        return True

    def uart_flush(self) -> None:
        """Wait until every queued character has been written out."""
        while not self._tx.empty():
            if not self._running.is_set():
                raise RuntimeError("UART is not running; queued data cannot drain")
            time.sleep(0.001)
        with self._tx_lock:
            pass

    def timer_init(self, tick_hz: int) -> None:
        """Set the tick frequency (0 means the default 1 kHz) and restart at zero."""
        hz = tick_hz or DEFAULT_TICK_HZ
        if not 0 < hz <= NS_PER_SECOND:
            raise ValueError(f"tick frequency {tick_hz} outside 1..{NS_PER_SECOND}")
        self._tick_hz = hz
        self._t0 = self._clock()

    def _period_ns(self) -> int:
        return NS_PER_SECOND // self._tick_hz

    def timer_ticks(self) -> int:
        """Ticks elapsed since the timer was started."""
        return (self._clock() - self._t0) // self._period_ns()

    def sleep_until(self, target_ticks: int) -> None:
        """Sleep until the timer reaches ``target_ticks``; return at once if past."""
        now = self.timer_ticks()
        if target_ticks <= now:
            return
        self._sleep((target_ticks - now) * self._period_ns() / NS_PER_SECOND)