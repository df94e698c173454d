from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from .aliases import ByteSize, MemoryOffset
from .enums import PoolEventKind


@dataclass(frozen=True, slots=True, order=True)
class Block:
    start: MemoryOffset
    size: ByteSize
    
    @property
    def end(self) -> int:
        return self.start + self.size
    
    def is_aligned(self) -> bool:
        return self.size > 0 and (self.size & (self.size - 1)) == 0 and self.start % self.size == 0
    
    def buddy_start(self) -> MemoryOffset:
        return MemoryOffset(self.start ^ self.size)
    
    def is_buddy_of(self, other: Block) -> bool:
        if self.size != other.size or self.size <= 0:
            return False
        lower, upper = (self, other) if self.start < other.start else (other, self)
        return upper.start - lower.start == self.size and lower.start % (2 * self.size) == 0
    
    def halves(self) -> Tuple[Self, Self]:
        half = ByteSize(self.size // 2)
        return (
            type(self)(self.start, half),
            type(self)(MemoryOffset(self.start + half), half),
        )
    
    def merged_with(self, buddy: Block) -> Self:
        if not self.is_buddy_of(buddy):
            raise ValueError(f"{buddy} is not the buddy of {self}")
        return type(self)(MemoryOffset(min(self.start, buddy.start)), ByteSize(self.size * 2))
    
    def overlaps(self, other: Block) -> bool:
        return self.start < other.end and other.start < self.end
    
    def covers(self, other: Block) -> bool:
        return self.start <= other.start and other.end <= self.end


@dataclass(frozen=True, slots=True)
class PoolEvent:
    kind: PoolEventKind
    block: Optional[Block]
    requested_size: Optional[ByteSize] = None
    buddy: Optional[Block] = None
    timestamp: float = field(default_factory=time.perf_counter)


@dataclass(frozen=True, slots=True)
class PoolStats:
    total: int
    free: int
    used: int
    free_block_count: int
    allocated_block_count: int
    largest_free_block: int
    requested_bytes: int
    allocation_count: int
    deallocation_count: int
    failed_allocations: int
    split_count: int
    merge_count: int
    peak_usage: int
    
    @property
    def usage_ratio(self) -> float:
        return self.used / self.total if self.total > 0 else 0.0
    
    @property
    def fragmentation_ratio(self) -> float:
        return 1.0 - (self.largest_free_block / self.free) if self.free > 0 else 0.0
    
    @property
    def internal_waste(self) -> int:
        return self.used - self.requested_bytes
