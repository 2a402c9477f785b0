"""
SHA-256 Engine

Streaming SHA-256 (FIPS 180-4) written in pure Python. Feed a message in
chunks of any size with update() and obtain the 32-byte digest with finish().
"""

from .constants import BLOCK_SIZE, DIGEST_SIZE
from .crypto import Sha256, compress, message_schedule
from .codec import sha256_bytes, sha256_of_chunks, double_sha256
from .conformance import KnownAnswerVector, KNOWN_ANSWER_VECTORS, self_test
from .options import SelfTestOptions
from .runtime.errors import (
    ErrorCode,
    Sha256Error,
    InvalidInputError,
    InvalidBlockError,
    EngineFinalizedError,
    SelfTestError,
)

__version__ = "1.0.0"
__all__ = [
    "BLOCK_SIZE",
    "DIGEST_SIZE",
    "Sha256",
    "compress",
    "message_schedule",
    "sha256_bytes",
    "sha256_of_chunks",
    "double_sha256",
    "KnownAnswerVector",
    "KNOWN_ANSWER_VECTORS",
    "self_test",
    "SelfTestOptions",
    "ErrorCode",
    "Sha256Error",
    "InvalidInputError",
    "InvalidBlockError",
    "EngineFinalizedError",
    "SelfTestError",
]
