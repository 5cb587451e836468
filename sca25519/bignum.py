"""Helpers for fixed-width unsigned integers held as Python ints.

Multi-precision values are plain non-negative ints. The helpers convert them
to and from little-endian 32-bit words, and provide the branch-free selection
primitives the scalar multiplication relies on.
"""

from __future__ import annotations

from typing import Iterable

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
BITS_256 = 256
MASK_256 = (1 << BITS_256) - 1


def _check_256(value: int) -> int:
    if not 0 <= value <= MASK_256:
        raise ValueError("value does not fit in 256 bits")
    return value


def to_words(value: int, count: int) -> list[int]:
    """Split ``value`` into ``count`` little-endian 32-bit words."""
    if count < 0:
        raise ValueError("word count must not be negative")
    if value < 0 or value >> (WORD_BITS * count):
        raise ValueError(f"value does not fit in {count} words")
    return [(value >> (WORD_BITS * i)) & WORD_MASK for i in range(count)]


def from_words(words: Iterable[int]) -> int:
    """Combine little-endian 32-bit words into one integer."""
    result = 0
    for position, word in enumerate(words):
        if not 0 <= word <= WORD_MASK:
            raise ValueError("word out of 32-bit range")
        result |= word << (WORD_BITS * position)
    return result


def shift_left_one(value: int) -> int:
    """Shift a 256-bit value left by one bit, dropping the top bit."""
    return (_check_256(value) << 1) & MASK_256


def shift_right_one(value: int) -> int:
    """Shift a 256-bit value right by one bit."""
    return _check_256(value) >> 1


def is_equal(x: int, y: int) -> bool:
    """Compare two 256-bit values without an early exit."""
    return (_check_256(x) ^ _check_256(y)) == 0


def greater_than(x: int, y: int) -> bool:
    """Return whether the 256-bit value ``x`` exceeds ``y``."""
    return _check_256(x) > _check_256(y)


def _check_bit(b: int) -> int:
    if b not in (0, 1):
        raise ValueError("condition must be 0 or 1")
    return int(b)


def conditional_move(r: int, x: int, b: int) -> int:
    """Return ``x`` when ``b`` is 1 and ``r`` when ``b`` is 0, branch-free."""
    mask = -_check_bit(b)
    return r ^ ((r ^ x) & mask)


def conditional_swap(a: int, b: int, condition: int) -> tuple[int, int]:
    """Return ``(b, a)`` when ``condition`` is 1, else ``(a, b)``, branch-free."""
    mask = -_check_bit(condition)
    diff = (a ^ b) & mask
    return a ^ diff, b ^ diff


def is_negative(b: int) -> bool:
    """Return whether the signed byte ``b`` is negative."""
    if not -128 <= b <= 127:
        raise ValueError("value is not a signed byte")
    return bool(((b & 0xFFFF) >> 15) & 1)


def multiply16x32(x: int, y: int) -> int:
    """Multiply a 16-bit by a 32-bit value in two 16x16 partial products."""
    x &= 0xFFFF
    y &= WORD_MASK
    result = x * (y & 0xFFFF)
    result += (x * (y >> 16)) << 16
    return result