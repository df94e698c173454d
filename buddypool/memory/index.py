"""
Ordered free-block index for BuddyPool library.

The index keeps free blocks sorted by start offset and bucketed by size,
so best-fit lookup, buddy lookup and overlap queries never need a full
re-sort of the free collection.
"""

from __future__ import annotations

import sys
from bisect import bisect_left, bisect_right, insort
from typing import Dict, Iterable, Iterator, List, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from ..types.aliases import ByteSize, MemoryOffset
from ..types.descriptors import Block


class FreeBlockIndex:
    """Free blocks keyed by start, with per-size buckets for best-fit."""
    
    __slots__ = ('_starts', '_blocks', '_buckets', '_sizes')
    
    def __init__(self):
        self._starts: List[MemoryOffset] = []
        self._blocks: Dict[MemoryOffset, Block] = {}
        self._buckets: Dict[ByteSize, List[MemoryOffset]] = {}
        self._sizes: List[ByteSize] = []
    
    @classmethod
    def from_blocks(cls, blocks: Iterable[Block]) -> Self:
        index = cls()
        for block in blocks:
            index.add(block)
        return index
    
    def __len__(self) -> int:
        return len(self._starts)
    
    def __iter__(self) -> Iterator[Block]:
        return (self._blocks[start] for start in self._starts)
    
    def __contains__(self, block: object) -> bool:
        if not isinstance(block, Block):
            return False
        return self._blocks.get(block.start) == block
    
    def add(self, block: Block) -> None:
        """Insert a free block; rejects blocks overlapping an existing one."""
        if block.size <= 0:
            raise ValueError(f"Block size must be positive: {block}")
        if self.overlapping(block):
            raise ValueError(f"{block} overlaps an existing free block")
        
        insort(self._starts, block.start)
        self._blocks[block.start] = block
        
        bucket = self._buckets.get(block.size)
        if bucket is None:
            bucket = self._buckets[block.size] = []
            insort(self._sizes, block.size)
        insort(bucket, block.start)
    
    def remove(self, block: Block) -> None:
        if block not in self:
            raise KeyError(block)
        
        del self._starts[bisect_left(self._starts, block.start)]
        del self._blocks[block.start]
        
        bucket = self._buckets[block.size]
        del bucket[bisect_left(bucket, block.start)]
        if not bucket:
            del self._buckets[block.size]
            del self._sizes[bisect_left(self._sizes, block.size)]
    
    def best_fit(self, size: int) -> Optional[Block]:
        """Smallest free block of at least ``size``, lowest start on ties."""
        i = bisect_left(self._sizes, size)
        if i == len(self._sizes):
            return None
        return self._blocks[self._buckets[self._sizes[i]][0]]
    
    def buddy_of(self, block: Block) -> Optional[Block]:
        candidate = self._blocks.get(block.buddy_start())
        if candidate is not None and candidate.is_buddy_of(block):
            return candidate
        return None
    
    def overlapping(self, block: Block) -> List[Block]:
        i = max(bisect_right(self._starts, block.start) - 1, 0)
        found = []
        while i < len(self._starts) and self._starts[i] < block.end:
            candidate = self._blocks[self._starts[i]]
            if candidate.overlaps(block):
                found.append(candidate)
            i += 1
        return found
    
    def by_address(self) -> List[Block]:
        return list(self)
    
    def by_size(self) -> List[Block]:
        return [
            self._blocks[start]
            for size in self._sizes
            for start in self._buckets[size]
        ]
    
    def largest(self) -> Optional[Block]:
        if not self._sizes:
            return None
        return self._blocks[self._buckets[self._sizes[-1]][0]]
    
    def clear(self) -> None:
        self._starts.clear()
        self._blocks.clear()
        self._buckets.clear()
        self._sizes.clear()
