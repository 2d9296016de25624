"""Tests for random sources and bit helpers."""

from __future__ import annotations

import hashlib
from collections import Counter

import pytest

from passgen.entropy import (
    SecureRandomSource,
    amplify_entropy,
    bits_to_bytes,
    bytes_to_bits,
)


class TestSecureRandomSource:
    def test_range(self):
        source = SecureRandomSource()
        values = [source.randbelow(7) for _ in range(2000)]
        assert min(values) >= 0
        assert max(values) <= 6
        # every value shows up across 2000 draws
        assert set(values) == set(range(7))

    def test_one(self):
        assert SecureRandomSource().randbelow(1) == 0

    @pytest.mark.parametrize("n", [0, -3])
    def test_rejects_non_positive(self, n):
        with pytest.raises(ValueError, match="positive"):
            SecureRandomSource().randbelow(n)

    def test_roughly_uniform(self):
        source = SecureRandomSource()
        counts = Counter(source.randbelow(4) for _ in range(8000))
        for value in range(4):
            assert 1700 < counts[value] < 2300


class TestBits:
    def test_bits_to_bytes(self):
        assert bits_to_bytes([1, 0, 0, 0, 0, 0, 0, 1]) == b"\x81"

    def test_bits_to_bytes_pads(self):
        assert bits_to_bytes([1, 1]) == b"\xc0"

    def test_empty(self):
        assert bits_to_bytes([]) == b""
        assert bytes_to_bits(b"") == []

    def test_bytes_to_bits_msb_first(self):
        assert bytes_to_bits(b"\x05") == [0, 0, 0, 0, 0, 1, 0, 1]


class TestAmplify:
    def test_zero_rounds_unchanged(self):
        assert amplify_entropy(b"abc", 0) == b"abc"

    def test_repeated_sha256(self):
        expected = hashlib.sha256(hashlib.sha256(b"abc").digest()).digest()
        assert amplify_entropy(b"abc", 2) == expected
