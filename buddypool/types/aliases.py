"""
Type aliases for BuddyPool library.

This module defines type aliases used throughout the library
for better type safety and code clarity.
"""

from typing import NewType

# Core type aliases
MemoryOffset = NewType('MemoryOffset', int)
ByteSize = NewType('ByteSize', int)
