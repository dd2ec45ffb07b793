"""
Entropy source:
Wraps the operating system CSPRNG and turns its bytes into the unsigned
integers the mapping step consumes.
"""

from __future__ import annotations

import logging
import math
import secrets
from typing import List, Protocol

logger = logging.getLogger(__name__)

UINT32_BYTES = 4
UINT32_RANGE = 1 << 32


class EntropySourceError(RuntimeError):
    """
    The secure random source failed or returned fewer bytes than asked for.
    """


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """
    Operating system CSPRNG (``secrets.token_bytes``).
    """

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


# Shared process-wide source; stateless, safe to reuse.
SYSTEM_SOURCE = SystemRandomSource()


def random_bytes(n: int, source: RandomSource | None = None) -> bytes:
    """
    Draw exactly `n` bytes from `source` (the OS CSPRNG by default).

    Any failure of the source is raised as EntropySourceError. There is no
    fallback to a non-cryptographic generator.
    """
    if n < 0:
        raise ValueError(f"Cannot draw a negative number of bytes ({n}).")
    if n == 0:
        return b""

    src = source or SYSTEM_SOURCE
    try:
        data = src.token_bytes(n)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceError(f"Secure random source failed: {exc}") from exc

    if len(data) != n:
        raise EntropySourceError(
            f"Secure random source returned {len(data)} bytes, expected {n}."
        )
    logger.debug("Drew %d bytes from %s", n, type(src).__name__)
    return data


def bytes_to_uint32s(data: bytes) -> List[int]:
    """
    Split bytes into big-endian unsigned 32-bit integers.
    Trailing bytes that do not fill a whole integer are ignored.
    """
    usable = len(data) - (len(data) % UINT32_BYTES)
    return [
        int.from_bytes(data[i : i + UINT32_BYTES], "big")
        for i in range(0, usable, UINT32_BYTES)
    ]


def random_uint32s(count: int, source: RandomSource | None = None) -> List[int]:
    """
    Return `count` independent uniform integers in [0, 2**32).
    """
    return bytes_to_uint32s(random_bytes(count * UINT32_BYTES, source))


def entropy_bits(length: int, alphabet_size: int) -> float:
    """
    Theoretical entropy of a uniformly drawn string, in bits.
    """
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return length * math.log2(alphabet_size)
