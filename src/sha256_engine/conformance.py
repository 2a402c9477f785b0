"""
Known-answer conformance checks.

Vectors are taken from FIPS 180-4 examples and the NIST SHA-256 test set,
plus zero-filled messages whose length straddles the one/two final block
decision.
"""

from __future__ import annotations
import logging
import re
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from .codec.hashes import sha256_bytes, sha256_of_chunks
from .options import SelfTestOptions
from .runtime.errors import SelfTestError

logger = logging.getLogger(__name__)

_DIGEST_HEX = re.compile(r"^[0-9a-f]{64}$")

PADDING_BOUNDARY_LENGTHS = (55, 56, 57, 63, 64, 65)


class KnownAnswerVector(BaseModel):
    """A message and its expected SHA-256 digest."""
    name: str = Field(..., description="Vector name")
    message: bytes = Field(default=b"", description="Message, repeated `repeat` times")
    repeat: int = Field(default=1, ge=1, description="Number of message repetitions")
    digest_hex: str = Field(..., description="Expected digest, lowercase hex")
    slow: bool = Field(default=False, description="Skipped unless explicitly requested")

    model_config = {"frozen": True}

    @field_validator("digest_hex")
    @classmethod
    def validate_digest_hex(cls, v: str) -> str:
        v = v.lower()
        if not _DIGEST_HEX.match(v):
            raise ValueError("digest_hex must be 64 hex characters")
        return v

    @property
    def digest(self) -> bytes:
        return bytes.fromhex(self.digest_hex)

    def expanded_message(self) -> bytes:
        return self.message * self.repeat


KNOWN_ANSWER_VECTORS: List[KnownAnswerVector] = [
    KnownAnswerVector(
        name="empty",
        message=b"",
        digest_hex="e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    ),
    KnownAnswerVector(
        name="abc",
        message=b"abc",
        digest_hex="ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    ),
    KnownAnswerVector(
        name="message digest",
        message=b"message digest",
        digest_hex="f7846f55cf23e14eebeab5b4e1550cad5b509e3348fbc4efa3a1413d393cb650",
    ),
    KnownAnswerVector(
        name="hello world",
        message=b"hello world",
        digest_hex="b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9",
    ),
    KnownAnswerVector(
        name="448-bit",
        message=b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
        digest_hex="248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1",
    ),
    KnownAnswerVector(
        name="896-bit",
        message=(b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
                 b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu"),
        digest_hex="cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1",
    ),
    KnownAnswerVector(
        name="55 zero bytes",
        message=b"\x00",
        repeat=55,
        digest_hex="02779466cdec163811d078815c633f21901413081449002f24aa3e80f0b88ef7",
    ),
    KnownAnswerVector(
        name="56 zero bytes",
        message=b"\x00",
        repeat=56,
        digest_hex="d4817aa5497628e7c77e6b606107042bbba3130888c5f47a375e6179be789fbb",
    ),
    KnownAnswerVector(
        name="57 zero bytes",
        message=b"\x00",
        repeat=57,
        digest_hex="65a16cb7861335d5ace3c60718b5052e44660726da4cd13bb745381b235a1785",
    ),
    KnownAnswerVector(
        name="63 zero bytes",
        message=b"\x00",
        repeat=63,
        digest_hex="c7723fa1e0127975e49e62e753db53924c1bd84b8ac1ac08df78d09270f3d971",
    ),
    KnownAnswerVector(
        name="64 zero bytes",
        message=b"\x00",
        repeat=64,
        digest_hex="f5a5fd42d16a20302798ef6ed309979b43003d2320d9f0e8ea9831a92759fb4b",
    ),
    KnownAnswerVector(
        name="65 zero bytes",
        message=b"\x00",
        repeat=65,
        digest_hex="98ce42deef51d40269d542f5314bef2c7468d401ad5d85168bfab4c0108f75f7",
    ),
    KnownAnswerVector(
        name="one million a",
        message=b"a",
        repeat=1_000_000,
        digest_hex="cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0",
        slow=True,
    ),
]


def split_chunks(message: bytes, size: int) -> List[bytes]:
    """Cut message into consecutive pieces of at most size bytes."""
    return [message[i:i + size] for i in range(0, len(message), size)]


def _check(name: str, message: bytes, expected: bytes, chunk_sizes: Sequence[int]) -> int:
    actual = sha256_bytes(message)
    if actual != expected:
        raise SelfTestError(
            f"Digest mismatch for vector {name!r}",
            details={"expected": expected.hex(), "actual": actual.hex()}
        )
    checks = 1

    for size in chunk_sizes:
        actual = sha256_of_chunks(split_chunks(message, size))
        if actual != expected:
            raise SelfTestError(
                f"Digest mismatch for vector {name!r} fed in {size}-byte chunks",
                details={"expected": expected.hex(), "actual": actual.hex(), "chunk_size": size}
            )
        checks += 1

    logger.debug(f"Vector {name!r} passed ({checks} checks)")
    return checks


def self_test(options: Optional[SelfTestOptions] = None) -> int:
    """
    Hash every known-answer vector.

    Args:
        options: Self test options (defaults to SelfTestOptions())

    Returns:
        Number of digest comparisons performed

    Raises:
        SelfTestError: On the first digest mismatch
    """
    options = options or SelfTestOptions()
    checks = 0

    for vector in KNOWN_ANSWER_VECTORS:
        if vector.slow and not options.include_slow:
            logger.debug(f"Skipping slow vector {vector.name!r}")
            continue
        checks += _check(vector.name, vector.expanded_message(), vector.digest, options.chunk_sizes)

    logger.info(f"SHA-256 self test passed ({checks} checks)")
    return checks


__all__ = [
    "KnownAnswerVector",
    "KNOWN_ANSWER_VECTORS",
    "PADDING_BOUNDARY_LENGTHS",
    "split_chunks",
    "self_test",
]
