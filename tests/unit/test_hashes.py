"""
One-shot hash helper tests.
"""

import hashlib

import pytest

from sha256_engine.codec import sha256_bytes, sha256_of_chunks, double_sha256
from sha256_engine.runtime.errors import InvalidInputError


class TestSha256Bytes:
    """Test sha256_bytes()."""

    def test_abc(self):
        assert sha256_bytes(b"abc").hex() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_matches_hashlib(self, random_message):
        assert sha256_bytes(random_message) == hashlib.sha256(random_message).digest()

    def test_calls_are_independent(self):
        first = sha256_bytes(b"one")
        sha256_bytes(b"two")
        assert sha256_bytes(b"one") == first

    def test_rejects_str(self):
        with pytest.raises(InvalidInputError):
            sha256_bytes("abc")


class TestSha256OfChunks:
    """Test sha256_of_chunks()."""

    def test_chunks_equal_concatenation(self):
        chunks = [b"hello", b" ", b"", b"world"]
        assert sha256_of_chunks(chunks) == sha256_bytes(b"hello world")

    def test_generator_input(self, random_message):
        pieces = (random_message[i:i + 33] for i in range(0, len(random_message), 33))
        assert sha256_of_chunks(pieces) == hashlib.sha256(random_message).digest()

    def test_no_chunks_is_empty_message(self):
        assert sha256_of_chunks([]) == hashlib.sha256(b"").digest()


class TestDoubleSha256:
    """Test double_sha256()."""

    def test_double_hash(self):
        data = b"test data"
        expected = hashlib.sha256(hashlib.sha256(data).digest()).digest()
        assert double_sha256(data) == expected

    def test_not_single_hash(self):
        assert double_sha256(b"x") != sha256_bytes(b"x")
