from __future__ import annotations
from typing import Optional

from .types.descriptors import Block


class BuddyPoolError(Exception):
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.context = kwargs


class InvalidCapacity(BuddyPoolError):
    def __init__(self, message: str, capacity: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.capacity = capacity


class InvalidSize(BuddyPoolError):
    def __init__(self, message: str, requested_size: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.requested_size = requested_size


class AllocationFailure(BuddyPoolError):
    def __init__(self, message: str, requested_size: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.requested_size = requested_size


class InsufficientMemory(AllocationFailure):
    def __init__(self, message: str, requested_size: Optional[int] = None,
                 rounded_size: Optional[int] = None, **kwargs):
        super().__init__(message, requested_size=requested_size, **kwargs)
        self.rounded_size = rounded_size


class DeallocationError(BuddyPoolError):
    def __init__(self, message: str, block: Optional[Block] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.block = block


class InvalidBlock(DeallocationError):
    pass


class DoubleRelease(DeallocationError):
    pass


__all__ = [
    'BuddyPoolError',
    'InvalidCapacity',
    'InvalidSize',
    'AllocationFailure',
    'InsufficientMemory',
    'DeallocationError',
    'InvalidBlock',
    'DoubleRelease',
]
