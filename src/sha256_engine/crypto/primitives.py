"""
SHA-256 block primitives.

Implements the logical functions of FIPS 180-4 section 4.1.2, the message
schedule of section 6.2.2 step 1 and the 64-round compression function.
All word arithmetic is reduced modulo 2^32 since Python integers do not wrap.
"""

import struct
from typing import List, Sequence, Tuple

from ..constants import BLOCK_SIZE, K, MASK_32, ROUNDS, SCHEDULE_LENGTH
from ..runtime.errors import InvalidBlockError

_BLOCK_WORDS = struct.Struct(">16I")


def rotr(x: int, n: int) -> int:
    """Rotate a 32-bit word right by n bits."""
    return ((x >> n) | (x << (32 - n))) & MASK_32


def ch(x: int, y: int, z: int) -> int:
    """Choose: bits of y where x is set, bits of z elsewhere."""
    return (x & y) ^ (~x & z & MASK_32)


def maj(x: int, y: int, z: int) -> int:
    """Bitwise majority of three words."""
    return (x & y) ^ (x & z) ^ (y & z)


def big_sigma0(x: int) -> int:
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def big_sigma1(x: int) -> int:
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def small_sigma0(x: int) -> int:
    return rotr(x, 7) ^ rotr(x, 18) ^ (x >> 3)


def small_sigma1(x: int) -> int:
    return rotr(x, 17) ^ rotr(x, 19) ^ (x >> 10)


def message_schedule(block: bytes) -> List[int]:
    """
    Expand a 64-byte block into the 64-word message schedule.

    Args:
        block: Exactly 64 bytes of padded message

    Returns:
        List of 64 32-bit words

    Raises:
        InvalidBlockError: If block is not 64 bytes
    """
    if len(block) != BLOCK_SIZE:
        raise InvalidBlockError(
            f"Block must be {BLOCK_SIZE} bytes, got {len(block)}",
            details={"length": len(block)}
        )

    w = list(_BLOCK_WORDS.unpack(block))
    for i in range(16, SCHEDULE_LENGTH):
        w.append((w[i - 16] + small_sigma0(w[i - 15]) + w[i - 7] + small_sigma1(w[i - 2])) & MASK_32)
    return w


def compress(state: Sequence[int], block: bytes) -> Tuple[int, ...]:
    """
    Mix one 64-byte block into the 8-word hash state.

    Args:
        state: Current hash state (8 32-bit words)
        block: Exactly 64 bytes of padded message

    Returns:
        New hash state as a tuple of 8 words
    """
    w = message_schedule(block)
    a, b, c, d, e, f, g, h = state

    for i in range(ROUNDS):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K[i] + w[i]) & MASK_32
        t2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32
        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    return tuple(
        (x + y) & MASK_32
        for x, y in zip(state, (a, b, c, d, e, f, g, h))
    )


__all__ = [
    "rotr",
    "ch",
    "maj",
    "big_sigma0",
    "big_sigma1",
    "small_sigma0",
    "small_sigma1",
    "message_schedule",
    "compress",
]
