"""
Hash Functions

One-shot SHA-256 helpers built on the streaming engine. Each helper creates a
fresh engine, so calls are independent of one another.
"""

from typing import Iterable

from ..crypto.sha256 import Sha256, BytesLike


def sha256_bytes(input_bytes: BytesLike) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)

    Raises:
        InvalidInputError: If input is not bytes-like
    """
    engine = Sha256.new()
    engine.update(input_bytes)
    return engine.finish()


def sha256_of_chunks(chunks: Iterable[BytesLike]) -> bytes:
    """
    Compute SHA-256 hash of a message supplied as consecutive chunks.

    Args:
        chunks: Byte chunks whose concatenation is the message

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    engine = Sha256.new()
    for chunk in chunks:
        engine.update(chunk)
    return engine.finish()


def double_sha256(data: BytesLike) -> bytes:
    """
    Calculate double SHA256 hash.

    Args:
        data: Data to hash

    Returns:
        SHA256(SHA256(data))
    """
    return sha256_bytes(sha256_bytes(data))


__all__ = [
    "sha256_bytes",
    "sha256_of_chunks",
    "double_sha256",
]
