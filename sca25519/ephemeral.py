"""Ephemeral and unprotected scalar multiplication on Curve25519.

The ephemeral variant uses a fresh scalar each time. It randomises the
projective coordinates at every conditional swap, but it does not blind
the scalar. The unprotected variant is a plain Montgomery ladder. Both
return the Edwards25519 encoding of the result.
"""

from __future__ import annotations

from typing import Optional

from . import bignum, curve, field
from .randomness import SystemWordSource, WordSource, randombytes
from .scalarmult import LadderState, ScalarMultError, mask_and_cswap

_TOP_BIT_255 = 1 << 255
_TOP_BIT = 254


def _check_scalar(scalar: bytes) -> int:
    scalar = bytes(scalar)
    if len(scalar) != 32:
        raise ValueError(f"expected a 32-byte scalar, got {len(scalar)} bytes")
    return int.from_bytes(scalar, "little")


def _affine_y(x0: int) -> int:
    try:
        return curve.compute_y_affine(x0)
    except ValueError as exc:
        raise ScalarMultError("point is not on the curve") from exc


def _finish(state: LadderState, yp: int) -> bytes:
    """Recover y and return the Edwards25519 encoding of the ladder result."""
    result = curve.compute_y_projective(
        state.xp, state.zp, state.xq, state.zq, state.x0, yp
    )
    x_ea, y_ea = curve.point_conversion_mp_ea(result.x, result.y, result.z)
    return curve.ed25519_encode(
        field.reduce_completely(x_ea), field.reduce_completely(y_ea)
    )


def ephemeral_scalarmult(
    scalar: bytes, point: bytes, source: Optional[WordSource] = None
) -> bytes:
    """Return the Edwards25519 encoding of ``[scalar] point``.

    ``point`` is the 32-byte Montgomery u-coordinate. The projective
    coordinates are randomised at every ladder step. Raises ScalarMultError
    when ``point`` is not on the curve.
    """
    s = _check_scalar(scalar)
    if source is None:
        source = SystemWordSource()

    x0 = field.unpack(point)
    yp = _affine_y(x0)

    wide = int.from_bytes(randombytes(64, source), "little")
    zq = field.reduce_completely(field.reduce_to_256_bits(wide)) | _TOP_BIT_255
    state = LadderState(
        x0=x0, xp=field.ONE, zp=0, xq=field.mul(zq, x0), zq=zq
    )

    prepared = (s ^ (s << 1)) & bignum.MASK_256
    for bit in range(_TOP_BIT, -1, -1):
        word = (prepared >> (32 * (bit >> 5))) & bignum.WORD_MASK
        mask_and_cswap(state, word, bit & 31, source)
        if bit >= 1:
            state.ladder_step()

    return _finish(state, yp)


def ephemeral_scalarmult_base(
    scalar: bytes, source: Optional[WordSource] = None
) -> bytes:
    """Return the encoding of ``[scalar]`` times the base point, ephemerally."""
    return ephemeral_scalarmult(scalar, curve.BASE_POINT, source)


def unprotected_scalarmult(scalar: bytes, point: bytes) -> bytes:
    """Return the Edwards25519 encoding of ``[scalar] point``.

    This is a plain ladder with no countermeasures. Bit 255 of the scalar is
    ignored. Raises ScalarMultError when ``point`` is not on the curve.
    """
    s = _check_scalar(scalar)
    x0 = field.unpack(point)
    yp = _affine_y(x0)

    state = LadderState(x0=x0, xp=field.ONE, zp=0, xq=x0, zq=field.ONE)
    previous = 0
    for bit_number in range(_TOP_BIT, -1, -1):
        bit = (s >> bit_number) & 1
        swap = bit ^ previous
        previous = bit
        state.xp, state.xq = field.cswap(state.xp, state.xq, swap)
        state.zp, state.zq = field.cswap(state.zp, state.zq, swap)
        state.ladder_step()

    state.xp, state.xq = field.cswap(state.xp, state.xq, previous)
    state.zp, state.zq = field.cswap(state.zp, state.zq, previous)

    return _finish(state, yp)


def unprotected_scalarmult_base(scalar: bytes) -> bytes:
    """Return the encoding of ``[scalar]`` times the base point, unprotected."""
    return unprotected_scalarmult(scalar, curve.BASE_POINT)