"""
Basic tests for BuddyPool library.

This module walks through the allocate/release demonstration and checks
the public API exported from the package root.
"""

import pytest

import buddypool
from buddypool import (
    Block,
    BuddyPool,
    IAllocator,
    create_demo_pool,
    create_page_pool,
    create_pool,
    get_default_pool,
)


class TestDemonstrationScenario:
    """The 1024-unit allocate/release sequence."""

    def setup_method(self):
        self.pool = BuddyPool(1024)

    def test_allocation_sequence(self):
        first = self.pool.allocate(60)
        assert first == Block(0, 64)
        assert self.pool.snapshot() == (
            Block(64, 64), Block(128, 128), Block(256, 256), Block(512, 512),
        )

        second = self.pool.allocate(500)
        assert second == Block(512, 512)
        assert self.pool.snapshot() == (Block(64, 64), Block(128, 128), Block(256, 256))

        third = self.pool.allocate(225)
        assert third == Block(256, 256)
        assert self.pool.snapshot() == (Block(64, 64), Block(128, 128))

        fourth = self.pool.allocate(110)
        assert fourth == Block(128, 128)
        assert self.pool.snapshot() == (Block(64, 64),)

    def test_release_sequence_cascades(self):
        blocks = [self.pool.allocate(size) for size in (60, 500, 225, 110)]

        self.pool.deallocate(blocks[0])
        assert self.pool.snapshot() == (Block(0, 128),)

        self.pool.deallocate(blocks[1])
        assert self.pool.snapshot() == (Block(0, 128), Block(512, 512))

        self.pool.deallocate(blocks[2])
        assert self.pool.snapshot() == (Block(0, 128), Block(256, 256), Block(512, 512))

        self.pool.deallocate(blocks[3])
        assert self.pool.snapshot() == (Block(0, 1024),)


class TestFactories:
    def test_create_pool(self):
        pool = create_pool(2048, min_block_size=16)
        assert pool.total_capacity == 2048
        assert pool.min_block_size == 16

    def test_demo_pool(self):
        pool = create_demo_pool()
        assert pool.total_capacity == 1024

    def test_page_pool(self):
        pool = create_page_pool(pages=16)
        assert pool.total_capacity == 16 * 4096
        assert pool.allocate(1) == Block(0, 4096)

    def test_default_pool_is_shared(self):
        assert get_default_pool() is get_default_pool()

    def test_pool_satisfies_allocator_protocol(self):
        assert isinstance(BuddyPool(64), IAllocator)


class TestPackage:
    def test_version(self):
        assert buddypool.__version__ == "1.0.0"

    def test_exports(self):
        for name in buddypool.__all__:
            assert hasattr(buddypool, name), name

    def test_repr(self):
        pool = BuddyPool(1024)
        pool.allocate(60)
        assert repr(pool) == "BuddyPool(total_capacity=1024, free_blocks=4, allocated_blocks=1)"


if __name__ == "__main__":
    pytest.main([__file__])
