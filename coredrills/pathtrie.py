"""An in-memory tree of slash-separated paths."""

from __future__ import annotations


def split_path(path: str) -> list[str]:
    """Split ``path`` on ``/``, dropping empty components."""
    return [part for part in path.split("/") if part]


class FileSystem:
    """Stores paths in a trie; adding a path creates every missing parent."""

    def __init__(self) -> None:
        self._root: dict[str, dict] = {}

    def add(self, path: str) -> None:
        """Add ``path`` and all of its parent directories."""
        node = self._root
        for part in split_path(path):
            node = node.setdefault(part, {})

    def find(self, path: str) -> bool:
        """Tell whether ``path`` was added, directly or as a parent."""
        node = self._root
        for part in split_path(path):
            child = node.get(part)
            if child is None:
                return False
            node = child
        return True

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.find(path)