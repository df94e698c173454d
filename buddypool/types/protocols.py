from __future__ import annotations

from typing import Dict, Protocol, Tuple, runtime_checkable

from .descriptors import Block, PoolEvent, PoolStats
from .enums import SnapshotOrder


@runtime_checkable
class IAllocator(Protocol):
    def allocate(self, requested_size: int) -> Block:
        ...
    
    def deallocate(self, block: Block) -> None:
        ...
    
    def snapshot(self, order: SnapshotOrder = SnapshotOrder.BY_SIZE) -> Tuple[Block, ...]:
        ...
    
    def stats(self) -> PoolStats:
        ...
    
    def get_fragmentation_ratio(self) -> float:
        ...
    
    def get_utilization_stats(self) -> Dict[str, float]:
        ...


@runtime_checkable
class PoolListener(Protocol):
    def __call__(self, event: PoolEvent) -> None:
        ...
