from __future__ import annotations
from functools import lru_cache

from .core.pool import BuddyPool

DEMO_CAPACITY = 1024
DEFAULT_PAGE_SIZE = 4096


@lru_cache(maxsize=1)
def get_default_pool() -> BuddyPool:
    return create_demo_pool()


def create_pool(total_capacity: int = DEMO_CAPACITY, **kwargs) -> BuddyPool:
    return BuddyPool(total_capacity, **kwargs)


def create_demo_pool() -> BuddyPool:
    return BuddyPool(DEMO_CAPACITY)


def create_page_pool(pages: int = 256, page_size: int = DEFAULT_PAGE_SIZE) -> BuddyPool:
    return BuddyPool(
        total_capacity=pages * page_size,
        min_block_size=page_size  # never hand out less than a page
    )
