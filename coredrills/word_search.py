"""Find which words of a list can be traced on a letter grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

_VISITED = None
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    word: Optional[str] = None


def _build_trie(words: Iterable[str]) -> _TrieNode:
    root = _TrieNode()
    for word in words:
        if not word:
            continue
        node = root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.word = word
    return root


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """Words that can be spelt by moving up, down, left or right on ``board``.

    A cell is used at most once per word. Each word is reported once, in the
    order the search meets it. The board is not modified.
    """
    grid: list[list[Optional[str]]] = [list(row) for row in board]
    if not grid or not grid[0]:
        return []
    rows, cols = len(grid), len(grid[0])
    root = _build_trie(words)
    found: list[str] = []

    def search(i: int, j: int, node: _TrieNode) -> None:
        if not (0 <= i < rows and 0 <= j < len(grid[i])):
            return
        char = grid[i][j]
        if char is _VISITED:
            return
        child = node.children.get(char)
        if child is None:
            return
        if child.word is not None:
            found.append(child.word)
            child.word = None
        grid[i][j] = _VISITED
        for di, dj in _STEPS:
            search(i + di, j + dj, child)
        grid[i][j] = char

    for i in range(rows):
        for j in range(cols):
            search(i, j, root)
    return found