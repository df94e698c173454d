"""
Type definitions and protocols for BuddyPool library.

This module provides the value types, enums, protocols and aliases
shared by the pool, its engines and the reporting layer.
"""

from .descriptors import Block, PoolEvent, PoolStats
from .enums import PoolEventKind, SnapshotOrder
from .protocols import IAllocator, PoolListener
from .aliases import MemoryOffset, ByteSize

__all__ = [
    # Descriptors
    "Block",
    "PoolEvent",
    "PoolStats",
    
    # Enums
    "PoolEventKind",
    "SnapshotOrder",
    
    # Protocols
    "IAllocator",
    "PoolListener",
    
    # Type aliases
    "MemoryOffset",
    "ByteSize",
]
