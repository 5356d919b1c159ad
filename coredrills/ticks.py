"""Tick counter arithmetic and consistent reads of a split 64-bit timer."""

from __future__ import annotations

from typing import Callable

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def _check_u32(name: str, value: int) -> None:
    if not 0 <= value <= MASK32:
        raise ValueError(f"{name} {value} is not a 32-bit unsigned value")


def _check_period(tick_period_ns: int) -> None:
    _check_u32("tick period", tick_period_ns)
    if tick_period_ns == 0:
        raise ValueError("tick period must be positive")


def ticks_to_ns(ticks: int, tick_period_ns: int) -> int:
    """Convert a 32-bit tick count to nanoseconds without overflow."""
    _check_u32("ticks", ticks)
    _check_period(tick_period_ns)
    return ticks * tick_period_ns


def ns_to_ticks(ns: int, tick_period_ns: int) -> int:
    """Convert nanoseconds to whole ticks, truncated to 32 bits."""
    if not 0 <= ns <= MASK64:
        raise ValueError(f"ns {ns} is not a 64-bit unsigned value")
    _check_period(tick_period_ns)
    return (ns // tick_period_ns) & MASK32


def elapsed_ticks(start: int, now: int) -> int:
    """Ticks from ``start`` to ``now`` on a wrapping 32-bit counter."""
    return (now - start) & MASK32


def read_timer(read_high: Callable[[], int], read_low: Callable[[], int]) -> int:
    """Read a 64-bit timer from its two halves without tearing.

    The high half is read, then the low half, and the high half again; the
    read is retried while a carry moved the high half in between.
    """
    while True:
        high = read_high() & MASK32
        low = read_low() & MASK32
        if high == read_high() & MASK32:
            return (high << 32) | low


def read_timer_unchecked(read_high: Callable[[], int], read_low: Callable[[], int]) -> int:
    """Read low then high half once; only safe when nothing can update the timer."""
    low = read_low() & MASK32
    high = read_high() & MASK32
    return (high << 32) | low


class SplitCounter:
    """A 64-bit counter kept as two 32-bit halves, updated low half first."""

    def __init__(self, value: int = 0) -> None:
        if not 0 <= value <= MASK64:
            raise ValueError(f"initial value {value} is not a 64-bit unsigned value")
        self.low = value & MASK32
        self.high = value >> 32

    @property
    def value(self) -> int:
        """The full 64-bit count."""
        return (self.high << 32) | self.low

    def advance(self, amount: int = 1) -> None:
        """Add ``amount`` to the counter, writing the low half before the high."""
        if amount < 0:
            raise ValueError("a counter only moves forward")
        new = (self.value + amount) & MASK64
        self.low = new & MASK32
        self.high = new >> 32

    def read_high(self) -> int:
        """Current high 32 bits."""
        return self.high

    def read_low(self) -> int:
        """Current low 32 bits."""
        return self.low