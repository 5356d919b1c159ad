"""Roughly time-ordered unique 64-bit IDs in the Snowflake layout.

Layout from the top: one zero sign bit, 41 bits of milliseconds since
``EPOCH_MS``, 10 bits of machine id and 12 bits of per-millisecond sequence.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

EPOCH_MS = 1609459200000  # 2021-01-01 00:00:00 UTC

MACHINE_ID_BITS = 10
SEQUENCE_BITS = 12

MAX_MACHINE_ID = (1 << MACHINE_ID_BITS) - 1
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1

MACHINE_ID_SHIFT = SEQUENCE_BITS
TIMESTAMP_SHIFT = SEQUENCE_BITS + MACHINE_ID_BITS


class ClockMovedBackwardsError(RuntimeError):
    """The clock reported a time earlier than the last ID's."""


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class SnowflakeParts:
    """The fields of an ID; ``timestamp_ms`` is milliseconds since the Unix epoch."""

    timestamp_ms: int
    machine_id: int
    sequence: int


def decompose_id(value: int) -> SnowflakeParts:
    """Split an ID back into its timestamp, machine id and sequence."""
    if value < 0:
        raise ValueError("a Snowflake ID is never negative")
    return SnowflakeParts(
        timestamp_ms=(value >> TIMESTAMP_SHIFT) + EPOCH_MS,
        machine_id=(value >> MACHINE_ID_SHIFT) & MAX_MACHINE_ID,
        sequence=value & MAX_SEQUENCE,
    )


class SnowflakeIdGenerator:
    """Generates IDs for one machine; safe to share between threads."""

    def __init__(self, machine_id: int, clock: Callable[[], int] = _wall_clock_ms) -> None:
        if not 0 <= machine_id <= MAX_MACHINE_ID:
            raise ValueError("Machine ID is out of range.")
        self.machine_id = machine_id
        self._clock = clock
        self._sequence = 0
        self._last_timestamp = -1
        self._lock = threading.Lock()

    def _until_next_millis(self, last: int) -> int:
        timestamp = self._clock()
        while timestamp <= last:
            timestamp = self._clock()
        return timestamp

    def generate(self) -> int:
        """Return a new ID; raise ClockMovedBackwardsError if time went back."""
        with self._lock:
            timestamp = self._clock()
            if timestamp < self._last_timestamp:
                raise ClockMovedBackwardsError(
                    "Clock moved backwards. Refusing to generate id."
                )
            if timestamp == self._last_timestamp:
                self._sequence = (self._sequence + 1) & MAX_SEQUENCE
                if self._sequence == 0:
                    timestamp = self._until_next_millis(self._last_timestamp)
            else:
                self._sequence = 0
            self._last_timestamp = timestamp
            return (
                ((timestamp - EPOCH_MS) << TIMESTAMP_SHIFT)
                | (self.machine_id << MACHINE_ID_SHIFT)
                | self._sequence
            )