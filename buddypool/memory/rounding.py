from __future__ import annotations

from ..exceptions import InvalidSize


def is_power_of_two(n: object) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two greater than or equal to ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise InvalidSize(f"Size must be an integer, got {type(n).__name__}", requested_size=None)
    if n <= 0:
        raise InvalidSize(f"Size must be positive: {n}", requested_size=n)
    return 1 << (n - 1).bit_length()
