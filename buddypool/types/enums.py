"""
Enumeration types for BuddyPool library.

This module defines the enumeration types used for pool events
and snapshot ordering.
"""

from enum import IntEnum


class PoolEventKind(IntEnum):
    """Kinds of observable pool steps."""
    ALLOCATE = 1
    SPLIT = 2
    RELEASE = 3
    MERGE = 4
    FAILURE = 5


class SnapshotOrder(IntEnum):
    """Orderings available for free-block snapshots."""
    BY_SIZE = 1
    BY_ADDRESS = 2
