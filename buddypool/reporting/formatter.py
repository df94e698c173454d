"""
Text rendering for BuddyPool library.

This module turns snapshots, pool events and statistics into the
human-readable progress lines printed by the demonstration driver.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List

from ..types.descriptors import Block, PoolEvent, PoolStats
from ..types.enums import PoolEventKind, SnapshotOrder

SEPARATOR = "-" * 59


def format_block(block: Block, unit: str = "KB") -> str:
    return f"Start: {block.start}, Size: {block.size} {unit}"


def format_snapshot(blocks: Iterable[Block], unit: str = "KB") -> List[str]:
    lines = [">>> Current Free Memory Blocks:"]
    lines.extend(format_block(block, unit) for block in blocks)
    lines.append(SEPARATOR)
    return lines


def format_event(event: PoolEvent, unit: str = "KB") -> str:
    if event.kind == PoolEventKind.FAILURE:
        return f"Allocation failed: Not enough memory for {event.requested_size} {unit}"
    block = event.block
    if event.kind == PoolEventKind.ALLOCATE:
        return (f"Allocated {block.size} {unit} at address {block.start} "
                f"| Process Request: {event.requested_size} {unit}")
    if event.kind == PoolEventKind.SPLIT:
        return (f"Splitting {block.size} {unit} at {block.start}: "
                f"{event.buddy.size} {unit} at {event.buddy.start} returned to free list")
    if event.kind == PoolEventKind.RELEASE:
        return f"Deallocating {block.size} {unit} at address {block.start}"
    if event.kind == PoolEventKind.MERGE:
        return (f"Merging buddies: {block.size} {unit} at {block.start} "
                f"and {event.buddy.size} {unit} at {event.buddy.start}")
    raise ValueError(f"Unknown event kind: {event.kind!r}")


def format_stats(stats: PoolStats, unit: str = "KB") -> List[str]:
    return [
        f"Used: {stats.used} / {stats.total} {unit} ({stats.usage_ratio:.1%})",
        f"Free blocks: {stats.free_block_count}, largest: {stats.largest_free_block} {unit}",
        f"Live blocks: {stats.allocated_block_count}, rounding waste: {stats.internal_waste} {unit}",
        f"Fragmentation: {stats.fragmentation_ratio:.3f}",
    ]


def block_to_dict(block: Block) -> Dict[str, int]:
    return {'start': block.start, 'size': block.size}


def snapshot_to_dict(pool) -> Dict[str, Any]:
    """JSON-serialisable view of a pool's free list, live blocks and stats."""
    stats = pool.stats()
    return {
        'capacity': pool.total_capacity,
        'free': [block_to_dict(block) for block in pool.snapshot(SnapshotOrder.BY_SIZE)],
        'allocated': [block_to_dict(block) for block in pool.allocated_blocks()],
        'stats': {
            'used': stats.used,
            'free': stats.free,
            'free_block_count': stats.free_block_count,
            'allocated_block_count': stats.allocated_block_count,
            'largest_free_block': stats.largest_free_block,
            'allocation_count': stats.allocation_count,
            'deallocation_count': stats.deallocation_count,
            'failed_allocations': stats.failed_allocations,
            'split_count': stats.split_count,
            'merge_count': stats.merge_count,
            'peak_usage': stats.peak_usage,
            'fragmentation_ratio': stats.fragmentation_ratio,
        },
    }
