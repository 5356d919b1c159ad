"""A Merkle tree over data blocks, for checking a data set's integrity."""

from __future__ import annotations

import hashlib
from typing import Iterable, Union

Block = Union[str, bytes]


def hash_block(data: Block) -> str:
    """SHA-256 of ``data`` (text is UTF-8 encoded) as lowercase hex."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


class MerkleTree:
    """Hashes the blocks, then pairs of hashes level by level up to one root.

    An odd node at the end of a level is paired with itself. A tree of no
    blocks has an empty root hash.
    """

    def __init__(self, blocks: Iterable[Block]) -> None:
        self.blocks = tuple(blocks)
        self.root_hash = self._build()

    def _build(self) -> str:
        level = [hash_block(block) for block in self.blocks]
        if not level:
            return ""
        while len(level) > 1:
            if len(level) % 2:
                level.append(level[-1])
            pairs = zip(level[0::2], level[1::2])
            level = [hash_block(left + right) for left, right in pairs]
        return level[0]

    def verify(self, blocks: Iterable[Block]) -> bool:
        """Tell whether ``blocks`` produce the same root hash as this tree."""
        return MerkleTree(blocks).root_hash == self.root_hash