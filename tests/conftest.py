from __future__ import annotations

import pytest

from gvpass.config import GenerationOptions


class FixedSource:
    """
    Deterministic stand-in for the OS random source.
    Replays `data` from the start, cycling when it runs out.
    """

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0
        self.requests: list[int] = []

    def token_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        out = bytearray()
        for _ in range(n):
            out.append(self.data[self.pos % len(self.data)])
            self.pos += 1
        return bytes(out)


class FailingSource:
    def token_bytes(self, n: int) -> bytes:
        raise OSError("entropy pool unavailable")


class ShortSource:
    def token_bytes(self, n: int) -> bytes:
        return b"\x00" * (n - 1)


def uint32_bytes(*values: int) -> bytes:
    return b"".join(v.to_bytes(4, "big") for v in values)


@pytest.fixture
def all_on() -> GenerationOptions:
    return GenerationOptions(length=16)


@pytest.fixture
def all_off() -> GenerationOptions:
    return GenerationOptions(
        length=16, uppercase=False, lowercase=False, numbers=False, symbols=False
    )
