"""
One-shot hashing helpers.

- hashes.py: SHA-256 over a single buffer, a sequence of chunks, or twice over
"""

from .hashes import sha256_bytes, sha256_of_chunks, double_sha256

__all__ = [
    "sha256_bytes",
    "sha256_of_chunks",
    "double_sha256",
]
