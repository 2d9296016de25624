"""
Randomness for password generation.

Every random draw made by the generator goes through a `RandomSource`.
The default is backed by the operating system's CSPRNG via `secrets`;
other sources (the quantum-mixed one, or deterministic ones in tests)
can be passed in wherever a source is accepted.

Also holds the bit helpers and the SHA-256 entropy amplifier used to
condition raw bitstreams before they are consumed.
"""

from __future__ import annotations

import hashlib
import secrets
from typing import List, Protocol


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Return a uniformly random integer in [0, n)."""
        ...


class SecureRandomSource:
    """
    OS-backed cryptographically secure source.

    Stateless: each call asks the OS for fresh randomness, so one instance
    can be shared by any number of concurrent callers.
    """

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


DEFAULT_SOURCE = SecureRandomSource()


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def bytes_to_bits(data: bytes) -> List[int]:
    """
    Convert bytes back into a list of bits (0/1), MSB first.
    """
    out_bits: List[int] = []
    for byte in data:
        for i in range(8):
            out_bits.append((byte >> (7 - i)) & 1)
    return out_bits


def amplify_entropy(data: bytes, rounds: int = 1) -> bytes:
    """
    Apply SHA-256 `rounds` times to mix a block of raw randomness.

    With `rounds <= 0` the block is returned unchanged.
    """
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data
