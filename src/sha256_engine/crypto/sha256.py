"""
Streaming SHA-256 engine.

Holds the running compression state, the partial-block buffer and the total
message length. Input may be supplied in chunks of any size; chunk boundaries
never affect the digest.

Example usage:
    ```python
    engine = Sha256.new()
    engine.update(b"hello ")
    engine.update(b"world")
    digest = engine.finish()
    ```
"""

from __future__ import annotations
import logging
import struct
from typing import Union

from ..constants import BLOCK_SIZE, DIGEST_SIZE, H0, LENGTH_FIELD_SIZE, MASK_64, PADDING_MARKER
from ..runtime.errors import EngineFinalizedError, InvalidInputError
from .primitives import compress

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

_DIGEST_WORDS = struct.Struct(">8I")


def as_byte_view(data: BytesLike) -> memoryview:
    """
    Return a flat byte view of a bytes-like object.

    Raises:
        InvalidInputError: If data does not support the buffer protocol
    """
    if isinstance(data, str):
        raise InvalidInputError("Strings must be encoded before hashing",
                                details={"type": type(data).__name__})
    try:
        return memoryview(data).cast("B")
    except TypeError as e:
        raise InvalidInputError(f"Input must be bytes-like, got {type(data).__name__}",
                                details={"type": type(data).__name__}, cause=e)


class Sha256:
    """
    SHA-256 hash engine.

    An engine is created fresh, receives any number of update() calls and
    then exactly one finish(). The length counter is not checked against the
    2^64-bit ceiling; longer messages wrap the length field modulo 2^64.
    Instances are not thread-safe.
    """

    name = "sha256"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self):
        self._state = H0
        self._buffer = bytearray()
        self._total_length = 0
        self._finalized = False

    @classmethod
    def new(cls) -> Sha256:
        """Create an engine in the initial state."""
        return cls()

    @property
    def total_length(self) -> int:
        """Number of message bytes supplied so far."""
        return self._total_length

    @property
    def pending_length(self) -> int:
        """Number of bytes waiting for a full block."""
        return len(self._buffer)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _ensure_open(self, operation: str) -> None:
        if self._finalized:
            raise EngineFinalizedError(
                f"Cannot {operation} after finish()",
                details={"operation": operation, "total_length": self._total_length}
            )

    def copy(self) -> Sha256:
        """
        Clone the engine for checkpointing.

        Returns:
            Independent engine with identical state

        Raises:
            EngineFinalizedError: If the engine was already finished
        """
        self._ensure_open("copy")
        clone = type(self)()
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._total_length = self._total_length
        return clone

    def update(self, data: BytesLike) -> None:
        """
        Feed the next chunk of the message.

        Args:
            data: Bytes-like chunk of any length, including empty

        Raises:
            InvalidInputError: If data is not bytes-like
            EngineFinalizedError: If finish() was already called
        """
        self._ensure_open("update")
        view = as_byte_view(data)
        size = len(view)
        self._total_length += size

        state = self._state
        buffer = self._buffer
        offset = 0

        if buffer:
            offset = min(BLOCK_SIZE - len(buffer), size)
            buffer += view[:offset]
            if len(buffer) < BLOCK_SIZE:
                return
            state = compress(state, buffer)
            buffer.clear()

        end = offset + (size - offset) // BLOCK_SIZE * BLOCK_SIZE
        for start in range(offset, end, BLOCK_SIZE):
            state = compress(state, view[start:start + BLOCK_SIZE])

        buffer += view[end:]
        self._state = state

    def _padding(self) -> bytes:
        # 0x80 marker, zeros up to 56 mod 64, then the 64-bit big-endian bit length
        zeros = (BLOCK_SIZE - LENGTH_FIELD_SIZE - 1 - len(self._buffer)) % BLOCK_SIZE
        bit_length = (self._total_length * 8) & MASK_64
        return PADDING_MARKER + bytes(zeros) + bit_length.to_bytes(LENGTH_FIELD_SIZE, "big")

    def finish(self) -> bytes:
        """
        Pad the message, process the final block(s) and return the digest.

        Returns:
            32-byte SHA-256 digest

        Raises:
            EngineFinalizedError: If finish() was already called
        """
        self._ensure_open("finish")
        tail = bytes(self._buffer) + self._padding()

        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = compress(state, tail[start:start + BLOCK_SIZE])

        logger.debug(f"Finalized SHA-256 over {self._total_length} bytes "
                     f"({len(tail) // BLOCK_SIZE} final block(s))")

        self._state = state
        self._buffer.clear()
        self._finalized = True
        return _DIGEST_WORDS.pack(*state)


__all__ = [
    "Sha256",
    "BytesLike",
    "as_byte_view",
]
