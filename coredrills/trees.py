"""Binary trees: breadth- and depth-first traversal and a text codec."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional

NULL_TOKEN = "N"


@dataclass
class TreeNode:
    """A binary tree node; equality compares whole subtrees."""

    val: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def bfs(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node values level by level, left to right, using a queue."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.val
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def dfs_preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node values in root-left-right order, using an explicit stack."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node.val
        # Right goes on first so that left comes off first.
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def serialize(root: Optional[TreeNode]) -> str:
    """Encode the tree as pre-order tokens, each followed by a space.

    Missing children are written as ``N``.
    """
    parts: list[str] = []
    stack: list[Optional[TreeNode]] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            parts.append(NULL_TOKEN)
            continue
        parts.append(str(node.val))
        stack.append(node.right)
        stack.append(node.left)
    return "".join(f"{part} " for part in parts)


def deserialize(data: str) -> Optional[TreeNode]:
    """Rebuild an integer tree from the text ``serialize`` produces.

    Raises ValueError when the text runs out early or holds a token that is
    neither ``N`` nor an integer. Tokens after a complete tree are ignored.
    """
    tokens = iter(data.split())

    def build() -> Optional[TreeNode]:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError("serialized tree ended too early") from None
        if token == NULL_TOKEN:
            return None
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"invalid tree token {token!r}") from None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order_with_nulls(root: Optional[TreeNode]) -> list[Any]:
    """Level-order values, with None for every missing child of a present node."""
    if root is None:
        return []
    out: list[Any] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            out.append(None)
            continue
        out.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    return out