from .buddy import coalesce, split_block
from .index import FreeBlockIndex
from .rounding import is_power_of_two, next_power_of_two

__all__ = [
    "FreeBlockIndex",
    "split_block",
    "coalesce",
    "next_power_of_two",
    "is_power_of_two",
]
