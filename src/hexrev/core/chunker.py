"""
Chunker module for splitting a buffer into fixed-size groups.
"""

from typing import Final, Iterator, Tuple

GROUP_SIZE: Final[int] = 16


def chunk(buffer: bytes, size: int = GROUP_SIZE) -> Iterator[bytes]:
    """
    Split a buffer into consecutive groups of `size` bytes.

    The last group holds the remainder and may be shorter. An empty
    remainder is never yielded, so an empty buffer yields nothing.

    Args:
        buffer (bytes): Data to split
        size (int): Number of bytes per group

    Returns:
        Iterator[bytes]: Groups in increasing offset order
    """

    if size <= 0:
        raise ValueError("Group size must be positive")

    for start in range(0, len(buffer), size):
        yield bytes(buffer[start:start + size])


def enumerate_groups(buffer: bytes) -> Iterator[Tuple[int, bytes]]:
    """Yield (line_index, group) pairs for a buffer."""

    return enumerate(chunk(buffer))


def group_count(buffer: bytes) -> int:
    """Get the number of groups the buffer splits into."""

    return (len(buffer) + GROUP_SIZE - 1) // GROUP_SIZE
