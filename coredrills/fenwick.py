"""Range sums with point updates over a Fenwick (binary indexed) tree."""

from __future__ import annotations

from typing import Iterable


def _lowbit(x: int) -> int:
    return x & -x


class NumArray:
    """An integer array supporting point updates and range sums in O(log n)."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = list(nums)
        self._size = len(values)
        self._tree = [0] * (self._size + 1)
        self._values = [0] * self._size
        for index, value in enumerate(values):
            self.update(index, value)

    def __len__(self) -> int:
        return self._size

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} outside 0..{self._size - 1}")

    def _add(self, position: int, delta: int) -> None:
        while position <= self._size:
            self._tree[position] += delta
            position += _lowbit(position)

    def _prefix(self, position: int) -> int:
        total = 0
        while position > 0:
            total += self._tree[position]
            position -= _lowbit(position)
        return total

    def update(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``."""
        self._check_index(index)
        delta = value - self._values[index]
        self._values[index] = value
        self._add(index + 1, delta)

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the elements from ``left`` to ``right``, both included."""
        self._check_index(left)
        self._check_index(right)
        if left > right:
            raise ValueError(f"empty range: left {left} is past right {right}")
        return self._prefix(right + 1) - self._prefix(left)