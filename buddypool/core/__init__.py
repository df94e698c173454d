"""
Core components of BuddyPool library.

This module contains the buddy-system pool that composes rounding,
the split engine and the merge engine into one allocation lifecycle.
"""

from .pool import BuddyPool

__all__ = [
    "BuddyPool",
]
