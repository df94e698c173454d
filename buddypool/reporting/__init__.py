"""
Reporting components for BuddyPool library.

This module renders pool snapshots and events as text and provides
listeners that record or log pool events.
"""

from .formatter import (
    format_block,
    format_event,
    format_snapshot,
    format_stats,
    snapshot_to_dict,
)
from .listeners import EventRecorder, LoggingListener

__all__ = [
    "format_block",
    "format_event",
    "format_snapshot",
    "format_stats",
    "snapshot_to_dict",
    "EventRecorder",
    "LoggingListener",
]
