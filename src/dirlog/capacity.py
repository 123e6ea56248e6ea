"""Capacity checks over aggregated directory sizes.

These helpers consume the sizes produced by subtree_sizes() and answer the two usual
questions about a full disk: how much space is held by small directories, and which
single directory should be deleted to free enough space.
"""

from typing import Iterable, Optional

from humanfriendly import InvalidSize
from humanfriendly import parse_size as parse_human_size


def parse_size(size_str: str) -> int:
    """Parse a decimal or human-readable size to bytes.

    Args:
        size_str: Size string like '70000000', '100K', '30MB' or '2.5GiB'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format
    """
    try:
        size = int(parse_human_size(size_str))
    except InvalidSize as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")
    if size < 0:
        raise ValueError(f"Size cannot be negative: '{size_str}'")
    return size


def sum_at_most(sizes: Iterable[int], limit: int) -> int:
    """Sum every size that does not exceed limit.

    Example:
        >>> sum_at_most([48381165, 94853, 584, 24933642], 100000)
        95437
    """
    return sum(size for size in sizes if size <= limit)


def smallest_at_least(sizes: Iterable[int], minimum: int) -> Optional[int]:
    """Find the smallest size that is at least minimum.

    Returns:
        The smallest qualifying size, or None if no size qualifies.

    Example:
        >>> smallest_at_least([48381165, 94853, 584, 24933642], 8381165)
        24933642
        >>> smallest_at_least([584], 1000) is None
        True
    """
    return min((size for size in sizes if size >= minimum), default=None)


def space_to_free(used: int, capacity: int, required: int) -> int:
    """Compute how many bytes must be freed to leave required bytes unused.

    Args:
        used: Bytes currently in use.
        capacity: Total capacity of the disk.
        required: Bytes that must be free afterwards.

    Returns:
        The number of bytes to free, 0 if enough space is already free.

    Raises:
        ValueError: If required exceeds capacity.

    Example:
        >>> space_to_free(48381165, 70000000, 30000000)
        8381165
    """
    if required > capacity:
        raise ValueError(f"Required free space ({required}) exceeds capacity ({capacity})")
    return max(0, required - (capacity - used))
