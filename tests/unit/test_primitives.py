"""
SHA-256 primitive tests.

Checks the FIPS 180-4 logical functions on hand-computed values, the message
schedule and a single compression of the padded "abc" block.
"""

import struct

import pytest

from sha256_engine.constants import H0, K, MASK_32, ROUNDS
from sha256_engine.crypto.primitives import (
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
from sha256_engine.runtime.errors import InvalidBlockError, ErrorCode

ABC_BLOCK = b"abc" + b"\x80" + bytes(52) + (24).to_bytes(8, "big")


class TestConstants:
    """Test constant tables."""

    def test_table_sizes(self):
        assert len(K) == 64
        assert len(H0) == 8
        assert all(0 <= k <= MASK_32 for k in K)

    def test_spot_values(self):
        """First and last entries from FIPS 180-4 sections 4.2.2 and 5.3.3."""
        assert K[0] == 0x428a2f98
        assert K[63] == 0xc67178f2
        assert H0[0] == 0x6a09e667
        assert H0[7] == 0x5be0cd19

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            K[0] = 0


class TestBitFunctions:
    """Test rotate and logical functions."""

    def test_rotr_wraps_low_bits(self):
        assert rotr(1, 1) == 0x80000000
        assert rotr(0x80000000, 31) == 1
        assert rotr(0x12345678, 8) == 0x78123456

    def test_rotr_stays_32_bit(self):
        assert rotr(MASK_32, 13) == MASK_32

    def test_ch_selects(self):
        y, z = 0xAAAAAAAA, 0x55555555
        assert ch(MASK_32, y, z) == y
        assert ch(0, y, z) == z
        assert ch(0xFFFF0000, y, z) == 0xAAAA5555

    def test_maj_votes(self):
        assert maj(MASK_32, MASK_32, 0) == MASK_32
        assert maj(MASK_32, 0, 0) == 0
        assert maj(0xF0F0F0F0, 0xFF00FF00, 0x0F0F0F0F) == 0xFF00FF00

    def test_small_sigmas(self):
        assert small_sigma0(1) == 0x02004000
        assert small_sigma0(0x80000000) == 0x11002000
        assert small_sigma1(1) == 0x0000A000

    def test_big_sigmas(self):
        assert big_sigma0(1) == 0x40080400
        assert big_sigma1(1) == 0x04200080


class TestMessageSchedule:
    """Test block decomposition and schedule expansion."""

    def test_first_words_are_block_words(self):
        w = message_schedule(ABC_BLOCK)

        assert len(w) == 64
        assert list(w[:16]) == list(struct.unpack(">16I", ABC_BLOCK))
        assert w[0] == 0x61626380
        assert w[15] == 0x00000018

    def test_expansion_wraps_modulo_2_32(self):
        w = message_schedule(b"\xff" * 64)

        assert all(0 <= word <= MASK_32 for word in w)
        expected = (w[0] + small_sigma0(w[1]) + w[9] + small_sigma1(w[14])) & MASK_32
        assert w[16] == expected

    def test_accepts_memoryview(self):
        assert message_schedule(memoryview(ABC_BLOCK)) == message_schedule(ABC_BLOCK)

    @pytest.mark.parametrize("length", [0, 63, 65])
    def test_rejects_wrong_block_size(self, length):
        with pytest.raises(InvalidBlockError) as exc_info:
            message_schedule(bytes(length))

        assert exc_info.value.code == ErrorCode.INVALID_BLOCK
        assert exc_info.value.details["length"] == length


class TestCompress:
    """Test the compression function."""

    def test_abc_single_block(self):
        """One compression of padded "abc" from H0 gives the FIPS digest words."""
        state = compress(H0, ABC_BLOCK)

        assert state == (
            0xba7816bf, 0x8f01cfea, 0x414140de, 0x5dae2223,
            0xb00361a3, 0x96177a9c, 0xb410ff61, 0xf20015ad,
        )

    def test_returns_new_tuple(self):
        state = list(H0)
        result = compress(state, ABC_BLOCK)

        assert isinstance(result, tuple)
        assert state == list(H0)

    def test_round_count_drives_loop(self, monkeypatch):
        """With no rounds the working variables equal the state, so it doubles."""
        assert ROUNDS == len(K)
        monkeypatch.setattr("sha256_engine.crypto.primitives.ROUNDS", 0)

        assert compress(H0, ABC_BLOCK) == tuple((x * 2) & MASK_32 for x in H0)

    def test_is_deterministic(self):
        block = bytes(range(64))
        assert compress(H0, block) == compress(H0, block)
        assert compress(H0, block) != compress(H0, ABC_BLOCK)
