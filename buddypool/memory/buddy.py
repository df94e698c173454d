from __future__ import annotations

from typing import List, Tuple

from .index import FreeBlockIndex
from ..types.descriptors import Block


def split_block(index: FreeBlockIndex, block: Block, target: int) -> Tuple[Block, List[Block]]:
    """Halve ``block`` down to ``target``, returning upper halves to ``index``.
    
    ``block`` must already be out of the index. Only the lower half keeps
    shrinking; each split puts exactly one sibling back on the free list.
    """
    if target <= 0 or block.size < target:
        raise ValueError(f"Cannot split {block} down to {target}")
    
    freed: List[Block] = []
    while block.size > target:
        block, upper = block.halves()
        index.add(upper)
        freed.append(upper)
    
    return block, freed


def coalesce(index: FreeBlockIndex, block: Block) -> Tuple[Block, List[Tuple[Block, Block]]]:
    """Insert ``block`` and merge it with its free buddy while one exists."""
    if index.overlapping(block):
        raise ValueError(f"{block} overlaps an existing free block")

    merges: List[Tuple[Block, Block]] = []

    buddy = index.buddy_of(block)
    while buddy is not None:
        index.remove(buddy)
        merges.append((block, buddy))
        block = block.merged_with(buddy)
        buddy = index.buddy_of(block)
    
    index.add(block)
    return block, merges


__all__ = ["split_block", "coalesce"]
