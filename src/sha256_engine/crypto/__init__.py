"""
Cryptographic primitives for the SHA-256 engine.

Provides the streaming Sha256 engine and the FIPS 180-4 block functions it is
built from.
"""

from .sha256 import Sha256, BytesLike, as_byte_view
from .primitives import (
    rotr,
    ch,
    maj,
    big_sigma0,
    big_sigma1,
    small_sigma0,
    small_sigma1,
    message_schedule,
    compress,
)

__all__ = [
    "Sha256",
    "BytesLike",
    "as_byte_view",
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
