"""A least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Hashable

MISSING = -1


class LRUCache:
    """Maps keys to values, evicting the least recently used key when full.

    ``get`` returns ``MISSING`` (-1) for an absent key. Both ``get`` and
    ``put`` mark the key as most recently used.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Any:
        """Value stored for ``key``, or -1 when it is not cached."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key, last=False)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if needed."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key, last=False)
            return
        if len(self._entries) >= self.capacity:
            self._entries.popitem(last=True)
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)

    def items(self) -> list[tuple[Hashable, Any]]:
        """Entries ordered from most to least recently used."""
        return list(self._entries.items())

    def __repr__(self) -> str:
        body = " ".join(f"[{k!r}:{v!r}]" for k, v in self._entries.items())
        return f"LRUCache(capacity={self.capacity}, {body or 'empty'})"