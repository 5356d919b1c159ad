"""Running median of a stream of numbers, kept with two heaps."""

from __future__ import annotations

import heapq


class MedianFinder:
    """Tracks the median as numbers arrive.

    The lower half lives in a max-heap (stored negated) and the upper half in
    a min-heap; the lower half holds the extra element when the count is odd.
    """

    def __init__(self) -> None:
        self._small: list[float] = []  # negated values of the lower half
        self._large: list[float] = []  # upper half

    def __len__(self) -> int:
        return len(self._small) + len(self._large)

    def add_num(self, num: float) -> None:
        """Add one number to the stream."""
        heapq.heappush(self._small, -num)
        heapq.heappush(self._large, -heapq.heappop(self._small))
        if len(self._small) < len(self._large):
            heapq.heappush(self._small, -heapq.heappop(self._large))

    def find_median(self) -> float:
        """Median of the numbers so far; 0.0 before any number arrives."""
        if len(self._small) > len(self._large):
            return float(-self._small[0])
        if not self._small:
            return 0.0
        return (-self._small[0] + self._large[0]) / 2.0