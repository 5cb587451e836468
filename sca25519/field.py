"""Arithmetic in the prime field of Curve25519, modulo ``2**255 - 19``.

Field elements are non-negative ints below ``2**256``. Inputs need not be
fully reduced: any 256-bit value stands for its residue modulo ``P``. Every
operation returns the fully reduced representative in ``[0, P)``.
"""

from __future__ import annotations

from . import bignum

P = (1 << 255) - 19
ONE = 1
A = 486662
MINUS_A = P - A
MINUS_A_DIV2 = P - A // 2
SQRT_M1 = int.from_bytes(
    bytes(
        [
            0xB0, 0xA0, 0x0E, 0x4A, 0x27, 0x1B, 0xEE, 0xC4,
            0x78, 0xE4, 0x2F, 0xAD, 0x06, 0x18, 0x43, 0x2F,
            0xA7, 0xD7, 0xFB, 0x3D, 0x99, 0x00, 0x4D, 0x2B,
            0x0B, 0xDF, 0xC1, 0x4F, 0x80, 0x24, 0x83, 0x2B,
        ]
    ),
    "little",
)

_MASK_255 = (1 << 255) - 1
_MASK_512 = (1 << 512) - 1


def _fe(value: int) -> int:
    if not 0 <= value <= bignum.MASK_256:
        raise ValueError("field element does not fit in 256 bits")
    return value


def unpack(data: bytes) -> int:
    """Read 32 little-endian bytes as a field element, ignoring bit 255."""
    data = bytes(data)
    if len(data) != 32:
        raise ValueError(f"expected 32 bytes, got {len(data)}")
    return int.from_bytes(data, "little") & _MASK_255


def pack(value: int) -> bytes:
    """Write the fully reduced element as 32 little-endian bytes."""
    return reduce_completely(value).to_bytes(32, "little")


def reduce_completely(value: int) -> int:
    """Return the canonical representative of ``value`` in ``[0, P)``."""
    return _fe(value) % P


def reduce_to_256_bits(value: int) -> int:
    """Fold a value of up to 512 bits into 256 bits, keeping it modulo ``P``.

    Uses ``2**256 == 38 (mod P)``; the result is below ``2**256`` but need not
    be fully reduced.
    """
    if not 0 <= value <= _MASK_512:
        raise ValueError("value does not fit in 512 bits")
    while value >> 256:
        value = (value & bignum.MASK_256) + 38 * (value >> 256)
    return value


def add(a: int, b: int) -> int:
    """Return ``a + b``."""
    return (_fe(a) + _fe(b)) % P


def sub(a: int, b: int) -> int:
    """Return ``a - b``."""
    return (_fe(a) - _fe(b)) % P


def neg(a: int) -> int:
    """Return ``-a``."""
    return (-_fe(a)) % P


def mul(a: int, b: int) -> int:
    """Return ``a * b``."""
    return (_fe(a) * _fe(b)) % P


def square(a: int) -> int:
    """Return ``a * a``."""
    a = _fe(a)
    return (a * a) % P


def mul121666(a: int) -> int:
    """Return ``121666 * a``, the ladder constant ``(A + 2) / 4``."""
    return (_fe(a) * 121666) % P


def mul_uint16(a: int, v: int) -> int:
    """Multiply by a 16-bit constant, as used for projective randomisation."""
    if not 0 <= v <= 0xFFFF:
        raise ValueError("multiplier does not fit in 16 bits")
    return (_fe(a) * v) % P


def invert(a: int) -> int:
    """Return ``a ** (P - 2)``, the inverse of ``a``; zero maps to zero."""
    return pow(_fe(a), P - 2, P)


def pow2523(a: int) -> int:
    """Return ``a ** ((P - 5) // 8)``, that is ``a ** (2**252 - 3)``."""
    return pow(_fe(a), (P - 5) // 8, P)


def squareroot(a: int) -> int:
    """Return a square root of ``a``.

    Raises ValueError when ``a`` is not a square in the field.
    """
    a = reduce_completely(a)
    root = mul(pow2523(a), a)
    if square(root) != a:
        root = mul(root, SQRT_M1)
    if square(root) != a:
        raise ValueError("value is not a square in the field")
    return root


def is_equal(a: int, b: int) -> bool:
    """Return whether ``a`` and ``b`` denote the same field element."""
    return reduce_completely(a) == reduce_completely(b)


def is_zero(a: int) -> bool:
    """Return whether ``a`` denotes zero."""
    return reduce_completely(a) == 0


def parity(a: int) -> int:
    """Return the lowest bit of the fully reduced element."""
    return reduce_completely(a) & 1


def cswap(a: int, b: int, condition: int) -> tuple[int, int]:
    """Swap ``a`` and ``b`` when ``condition`` is 1, without branching."""
    return bignum.conditional_swap(_fe(a), _fe(b), condition)


def cmov(target: int, value: int, condition: int) -> int:
    """Return ``value`` when ``condition`` is 1, else ``target``."""
    return bignum.conditional_move(_fe(target), _fe(value), condition)