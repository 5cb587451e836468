"""Arithmetic modulo the order of the Ed25519 base-point group."""

from __future__ import annotations

ORDER = (1 << 252) + 27742317777372353535851937790883648493

ONE_HALF = int.from_bytes(
    bytes(
        [
            0xF7, 0xE9, 0x7A, 0x2E, 0x8D, 0x31, 0x09, 0x2C,
            0x6B, 0xCE, 0x7B, 0x51, 0xEF, 0x7C, 0x6F, 0x0A,
            0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
            0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x08,
        ]
    ),
    "little",
)


def _check_length(data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) != length:
        raise ValueError(f"expected {length} bytes, got {len(data)}")
    return data


def from_64bytes(data: bytes) -> int:
    """Read a 512-bit little-endian value and reduce it modulo the order."""
    return int.from_bytes(_check_length(data, 64), "little") % ORDER


def from_32bytes(data: bytes) -> int:
    """Read a 256-bit little-endian value and reduce it modulo the order."""
    return int.from_bytes(_check_length(data, 32), "little") % ORDER


def to_32bytes(value: int) -> bytes:
    """Write a scalar as 32 little-endian bytes."""
    if not 0 <= value < 1 << 256:
        raise ValueError("scalar does not fit in 32 bytes")
    return value.to_bytes(32, "little")


def reduce(value: int) -> int:
    """Reduce a value of at most 512 bits modulo the group order."""
    if not 0 <= value < 1 << 512:
        raise ValueError("value does not fit in 512 bits")
    return value % ORDER


def add(a: int, b: int) -> int:
    """Return ``a + b`` modulo the group order."""
    return (a + b) % ORDER


def sub(a: int, b: int) -> int:
    """Return ``a - b`` modulo the group order."""
    return (a - b) % ORDER


def mul(a: int, b: int) -> int:
    """Return ``a * b`` modulo the group order."""
    return (a * b) % ORDER


def square(a: int) -> int:
    """Return ``a * a`` modulo the group order."""
    return (a * a) % ORDER


def invert(a: int) -> int:
    """Return the multiplicative inverse of ``a`` modulo the group order."""
    if a % ORDER == 0:
        raise ZeroDivisionError("zero has no inverse modulo the group order")
    return pow(a, ORDER - 2, ORDER)