"""Sources of random 32-bit words and the byte generator built on them."""

from __future__ import annotations

import random
import secrets
from typing import Optional, Protocol


class WordSource(Protocol):
    """Anything that yields uniformly random 32-bit words."""

    def next_word(self) -> int: ...


class SystemWordSource:
    """Word source backed by the operating system's CSPRNG."""

    def next_word(self) -> int:
        return secrets.randbits(32)


class SeededWordSource:
    """Deterministic word source for reproducible runs; not for real keys."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    def next_word(self) -> int:
        return self._rng.getrandbits(32)


def randombytes(length: int, source: Optional[WordSource] = None) -> bytes:
    """Return ``length`` random bytes drawn word by word from ``source``.

    Full words are emitted in little-endian order; the final one to four
    bytes come from one further word, emitted highest requested byte first.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if source is None:
        source = SystemWordSource()
    out = bytearray()
    remaining = length
    while remaining > 4:
        out += (source.next_word() & 0xFFFFFFFF).to_bytes(4, "little")
        remaining -= 4
    if remaining:
        word = (source.next_word() & 0xFFFFFFFF).to_bytes(4, "little")
        out += bytes(reversed(word[:remaining]))
    return bytes(out)