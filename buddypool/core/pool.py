"""
Buddy-system pool implementation for BuddyPool library.

This module provides the pool that owns a single contiguous region,
services power-of-two allocations by splitting free blocks and
coalesces released blocks with their buddies.
"""

from __future__ import annotations
import logging
from threading import RLock
from typing import Dict, List, Tuple

from ..types.aliases import ByteSize, MemoryOffset
from ..types.descriptors import Block, PoolEvent, PoolStats
from ..types.enums import PoolEventKind, SnapshotOrder
from ..types.protocols import PoolListener
from ..memory.index import FreeBlockIndex
from ..memory.buddy import coalesce, split_block
from ..memory.rounding import is_power_of_two, next_power_of_two
from ..exceptions import (
    DoubleRelease,
    InsufficientMemory,
    InvalidBlock,
    InvalidCapacity,
)

logger = logging.getLogger(__name__)


class BuddyPool:
    """Buddy allocator over ``[0, total_capacity)``.

    Allocated blocks are handed to the caller and recorded in a ledger of
    live blocks; ``deallocate`` only accepts blocks found in that ledger.
    """

    __slots__ = (
        '_total_capacity', '_min_block_size', '_free', '_live', '_lock',
        '_listeners', '_allocation_count', '_deallocation_count',
        '_failed_allocations', '_split_count', '_merge_count', '_peak_usage',
        '_used'
    )

    def __init__(self, total_capacity: int, min_block_size: int = 1):
        if not is_power_of_two(total_capacity):
            raise InvalidCapacity(
                f"Pool capacity must be a positive power of 2: {total_capacity}",
                capacity=total_capacity
            )
        if not is_power_of_two(min_block_size) or min_block_size > total_capacity:
            raise InvalidCapacity(
                f"Minimum block size must be a power of 2 no larger than the pool: {min_block_size}",
                capacity=total_capacity,
                min_block_size=min_block_size
            )

        self._total_capacity = ByteSize(total_capacity)
        self._min_block_size = ByteSize(min_block_size)
        self._free = FreeBlockIndex()
        self._live: Dict[Block, ByteSize] = {}
        self._lock = RLock()
        self._listeners: List[PoolListener] = []
        self._reset_state()

    def _reset_state(self) -> None:
        self._free.clear()
        self._free.add(Block(MemoryOffset(0), self._total_capacity))
        self._live.clear()
        self._used = 0
        self._allocation_count = 0
        self._deallocation_count = 0
        self._failed_allocations = 0
        self._split_count = 0
        self._merge_count = 0
        self._peak_usage = 0

    @property
    def total_capacity(self) -> ByteSize:
        return self._total_capacity

    @property
    def min_block_size(self) -> ByteSize:
        return self._min_block_size

    @property
    def free_bytes(self) -> int:
        return self._total_capacity - self._used

    @property
    def used_bytes(self) -> int:
        return self._used

    def add_listener(self, listener: PoolListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: PoolListener) -> None:
        with self._lock:
            self._listeners.remove(listener)

    def _dispatch(self, events: List[PoolEvent]) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for event in events:
            for listener in listeners:
                try:
                    listener(event)
                except Exception:
                    logger.exception("Pool listener %r failed on %s event", listener, event.kind.name)

    def allocate(self, requested_size: int) -> Block:
        """Allocate a block of ``next_power_of_two(requested_size)``.

        Raises ``InvalidSize`` for non-positive requests and
        ``InsufficientMemory`` when no free block is large enough; the pool
        is unchanged in both cases.
        """
        target = max(next_power_of_two(requested_size), self._min_block_size)

        with self._lock:
            candidate = self._free.best_fit(target)

            if candidate is None:
                self._failed_allocations += 1
                failure = PoolEvent(
                    PoolEventKind.FAILURE,
                    None,
                    requested_size=ByteSize(requested_size)
                )
            else:
                self._free.remove(candidate)
                block, freed = split_block(self._free, candidate, target)

                self._live[block] = ByteSize(requested_size)
                self._used += block.size
                self._peak_usage = max(self._peak_usage, self._used)
                self._allocation_count += 1
                self._split_count += len(freed)

                events = [
                    PoolEvent(
                        PoolEventKind.SPLIT,
                        Block(MemoryOffset(upper.start - upper.size), ByteSize(upper.size * 2)),
                        buddy=upper
                    )
                    for upper in freed
                ]
                events.append(PoolEvent(PoolEventKind.ALLOCATE, block, requested_size=ByteSize(requested_size)))

        if candidate is None:
            self._dispatch([failure])
            raise InsufficientMemory(
                f"Not enough memory for {requested_size} (needs a free block of {target})",
                requested_size=requested_size,
                rounded_size=target
            )

        self._dispatch(events)
        return block

    def deallocate(self, block: Block) -> None:
        """Return a live block to the pool and coalesce it with its buddies."""
        self._validate_geometry(block)

        with self._lock:
            if block not in self._live:
                if any(free.covers(block) for free in self._free.overlapping(block)):
                    raise DoubleRelease(f"{block} is already free", block=block)
                raise InvalidBlock(f"{block} is not a live allocation of this pool", block=block)

            del self._live[block]
            _, merges = coalesce(self._free, block)

            self._used -= block.size
            self._deallocation_count += 1
            self._merge_count += len(merges)

            events = [PoolEvent(PoolEventKind.RELEASE, block)]
            events.extend(
                PoolEvent(PoolEventKind.MERGE, lower, buddy=buddy)
                for lower, buddy in merges
            )

        self._dispatch(events)

    def _validate_geometry(self, block: Block) -> None:
        if not isinstance(block, Block):
            raise InvalidBlock(f"Expected a Block, got {type(block).__name__}")
        if not isinstance(block.start, int) or block.start < 0:
            raise InvalidBlock(f"Block start must be a non-negative integer: {block.start}", block=block)
        if not is_power_of_two(block.size):
            raise InvalidBlock(f"Block size must be a positive power of 2: {block.size}", block=block)
        if block.end > self._total_capacity:
            raise InvalidBlock(
                f"{block} extends beyond pool capacity {self._total_capacity}", block=block
            )
        if not block.is_aligned():
            raise InvalidBlock(f"{block} is not aligned to its size", block=block)

    def snapshot(self, order: SnapshotOrder = SnapshotOrder.BY_SIZE) -> Tuple[Block, ...]:
        with self._lock:
            if order == SnapshotOrder.BY_ADDRESS:
                return tuple(self._free.by_address())
            return tuple(self._free.by_size())

    def allocated_blocks(self) -> Tuple[Block, ...]:
        with self._lock:
            return tuple(sorted(self._live))

    def is_allocated(self, block: Block) -> bool:
        with self._lock:
            return block in self._live

    def reset(self) -> None:
        """Forget every live block and restore the single free block."""
        with self._lock:
            self._reset_state()

    def stats(self) -> PoolStats:
        with self._lock:
            largest = self._free.largest()
            return PoolStats(
                total=self._total_capacity,
                free=self._total_capacity - self._used,
                used=self._used,
                free_block_count=len(self._free),
                allocated_block_count=len(self._live),
                largest_free_block=largest.size if largest is not None else 0,
                requested_bytes=sum(self._live.values()),
                allocation_count=self._allocation_count,
                deallocation_count=self._deallocation_count,
                failed_allocations=self._failed_allocations,
                split_count=self._split_count,
                merge_count=self._merge_count,
                peak_usage=self._peak_usage
            )

    def get_fragmentation_ratio(self) -> float:
        return self.stats().fragmentation_ratio

    def get_utilization_stats(self) -> Dict[str, float]:
        stats = self.stats()
        return {
            'utilization': stats.usage_ratio,
            'fragmentation': stats.fragmentation_ratio,
            'allocation_count': float(stats.allocation_count),
            'deallocation_count': float(stats.deallocation_count),
            'failed_allocations': float(stats.failed_allocations),
            'free_blocks': float(stats.free_block_count),
            'allocated_blocks': float(stats.allocated_block_count),
            'internal_waste': float(stats.internal_waste),
            'peak_usage': float(stats.peak_usage)
        }

    def __repr__(self) -> str:
        return (f"BuddyPool(total_capacity={self._total_capacity}, "
                f"free_blocks={len(self._free)}, allocated_blocks={len(self._live)})")
