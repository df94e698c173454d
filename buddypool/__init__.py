"""
BuddyPool - Buddy-System Memory Allocator Simulator

A buddy-system allocator over a single contiguous pool of fixed size.
Requests are rounded up to the next power of two, served by splitting
the best-fitting free block, and released blocks are coalesced with
their buddies.

Key Features:
- Best-fit power-of-two allocation with recursive splitting
- Cascading buddy coalescing on release
- Ledger of live blocks rejecting double and forged releases
- Ordered free-block index with per-size buckets
- Event listeners, statistics and text/JSON reporting
"""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

# Core components
from .core.pool import BuddyPool
from .factory import (
    create_pool,
    create_demo_pool,
    create_page_pool,
    get_default_pool
)

# Engines
from .memory.index import FreeBlockIndex
from .memory.buddy import split_block, coalesce
from .memory.rounding import next_power_of_two, is_power_of_two

# Reporting
from .reporting.formatter import (
    format_block,
    format_event,
    format_snapshot,
    format_stats,
    snapshot_to_dict
)
from .reporting.listeners import EventRecorder, LoggingListener

# Types
from .types.descriptors import Block, PoolEvent, PoolStats
from .types.enums import PoolEventKind, SnapshotOrder
from .types.protocols import IAllocator, PoolListener
from .types.aliases import MemoryOffset, ByteSize

# Exceptions
from .exceptions import (
    BuddyPoolError,
    InvalidCapacity,
    InvalidSize,
    AllocationFailure,
    InsufficientMemory,
    DeallocationError,
    InvalidBlock,
    DoubleRelease
)

__all__ = [
    # Core
    "BuddyPool",
    "create_pool",
    "create_demo_pool",
    "create_page_pool",
    "get_default_pool",
    
    # Engines
    "FreeBlockIndex",
    "split_block",
    "coalesce",
    "next_power_of_two",
    "is_power_of_two",
    
    # Reporting
    "format_block",
    "format_event",
    "format_snapshot",
    "format_stats",
    "snapshot_to_dict",
    "EventRecorder",
    "LoggingListener",
    
    # Types
    "Block",
    "PoolEvent",
    "PoolStats",
    "PoolEventKind",
    "SnapshotOrder",
    "IAllocator",
    "PoolListener",
    "MemoryOffset",
    "ByteSize",
    
    # Exceptions
    "BuddyPoolError",
    "InvalidCapacity",
    "InvalidSize",
    "AllocationFailure",
    "InsufficientMemory",
    "DeallocationError",
    "InvalidBlock",
    "DoubleRelease",
]
