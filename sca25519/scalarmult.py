"""Side-channel protected scalar multiplication on Curve25519.

The scalar is blinded multiplicatively by a random 64-bit value ``r``. The
ladder computes ``[s * r**-1] P`` and then ``[r]`` of that point. Both
ladders randomise the projective coordinates at every conditional swap and
mask the scalar bits with random address bits. The result is the
Edwards25519 encoding of ``[s] P``. It does not depend on the random source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import bignum, curve, field, scalar as sc
from .cswap import cswap_and_randomize, rotate_right
from .randomness import SystemWordSource, WordSource, randombytes

_MASK_96 = (1 << 96) - 1
_TOP_BIT_255 = 1 << 255


class ScalarMultError(ValueError):
    """Raised when a scalar multiplication cannot be carried out."""


@dataclass
class LadderState:
    """Working points of the Montgomery ladder.

    ``(xp : zp)`` and ``(xq : zq)`` are projective x-only points. ``x0`` is the
    affine x-coordinate of their difference.
    """

    x0: int
    xp: int
    zp: int
    xq: int
    zq: int

    def ladder_step(self) -> None:
        """Double ``(xp : zp)`` and add it to ``(xq : zq)``, in place."""
        a = field.add(self.xp, self.zp)
        b = field.sub(self.xp, self.zp)
        c = field.add(self.xq, self.zq)
        d = field.sub(self.xq, self.zq)
        da = field.mul(d, a)
        cb = field.mul(c, b)
        self.xq = field.square(field.add(da, cb))
        self.zq = field.mul(field.square(field.sub(da, cb)), self.x0)
        aa = field.square(a)
        bb = field.square(b)
        e = field.sub(aa, bb)
        self.xp = field.mul(aa, bb)
        self.zp = field.mul(e, field.add(field.mul121666(e), bb))


def mask_and_cswap(
    state: LadderState,
    word: int,
    bit_number: int,
    source: Optional[WordSource] = None,
) -> None:
    """Swap the working points when bit ``bit_number`` of ``word`` is set.

    The other bits of the word are overwritten with random data first. Both
    points are re-randomised projectively along the way.
    """
    if not 0 <= bit_number <= 31:
        raise ValueError("bit number must be between 0 and 31")
    data = randombytes(8, source)
    mask_word = int.from_bytes(data[:4], "little")
    random_val = int.from_bytes(data[4:], "little")

    mask = mask_word & ~(1 << bit_number) & bignum.WORD_MASK
    swap_data = rotate_right((word & bignum.WORD_MASK) ^ mask, bit_number)

    state.xp, state.xq = cswap_and_randomize(swap_data, state.xp, state.xq, random_val)
    state.zp, state.zq = cswap_and_randomize(swap_data, state.zp, state.zq, random_val)


def _word_at(value: int, bit: int) -> int:
    return (value >> (32 * (bit >> 5))) & bignum.WORD_MASK


def _random_z(source: WordSource) -> int:
    """Return a random field value that is surely non-zero modulo ``P``."""
    wide = int.from_bytes(randombytes(64, source), "little")
    z = field.reduce_completely(field.reduce_to_256_bits(wide))
    return z | _TOP_BIT_255


def _reset_points(state: LadderState, source: WordSource) -> None:
    """Set P to infinity and Q to a randomised projective copy of ``x0``."""
    state.zq = _random_z(source)
    state.xq = field.mul(state.zq, state.x0)
    state.xp = field.ONE
    state.zp = 0


def _run_ladder(
    state: LadderState,
    prepared: int,
    itoh_shift: int,
    top_bit: int,
    source: WordSource,
) -> None:
    """Run the masked ladder over bits ``top_bit`` down to 0 of ``prepared``.

    ``prepared`` holds each scalar bit xor-ed with the one below it and with
    the random address mask. ``itoh_shift`` is that mask shifted up by one.
    """
    first = top_bit + 1
    mask_and_cswap(state, _word_at(itoh_shift, first), first & 31, source)
    for bit in range(top_bit, -1, -1):
        mask_and_cswap(state, _word_at(prepared, bit), bit & 31, source)
        if bit >= 1:
            state.ladder_step()
            mask_and_cswap(state, _word_at(itoh_shift, bit), bit & 31, source)


def _blinding_value(source: WordSource) -> int:
    """Draw a non-zero 64-bit blinding value."""
    while True:
        value = int.from_bytes(randombytes(8, source), "little")
        if value:
            return value


def scalarmult(
    scalar: bytes, point: bytes, source: Optional[WordSource] = None
) -> bytes:
    """Return the Edwards25519 encoding of ``[scalar] point``.

    ``scalar`` is 32 little-endian bytes. ``point`` is the 32-byte
    Montgomery u-coordinate. Raises ScalarMultError when ``point`` is not on
    the curve.
    """
    scalar = bytes(scalar)
    if len(scalar) != 32:
        raise ValueError(f"expected a 32-byte scalar, got {len(scalar)} bytes")
    if source is None:
        source = SystemWordSource()

    s = int.from_bytes(scalar, "little")
    x0 = field.unpack(point)
    state = LadderState(x0=x0, xp=x0, zp=field.ONE, xq=field.ONE, zq=0)

    try:
        yp = field.reduce_completely(curve.compute_y_affine(state.x0))
    except ValueError as exc:
        raise ScalarMultError("point is not on the curve") from exc

    # Multiplicative scalar blinding: s' = s * r**-1 mod the group order.
    r = _blinding_value(source)
    rand_b = field.reduce_to_256_bits(int.from_bytes(randombytes(64, source), "little"))
    t = sc.invert(sc.mul(r, rand_b))
    r_inv = sc.mul(t, rand_b)
    s = sc.mul(s, r_inv)

    _reset_points(state, source)

    prepared = (s ^ (s << 1)) & bignum.MASK_256
    itoh = int.from_bytes(randombytes(32, source), "little") & ~_TOP_BIT_255
    itoh_shift = (itoh << 1) & bignum.MASK_256
    prepared ^= itoh

    _run_ladder(state, prepared, itoh_shift, 254, source)

    partial = curve.compute_y_projective(
        state.xp, state.zp, state.xq, state.zq, state.x0, yp
    )
    z_inv = field.invert(partial.z)
    x_aff = field.reduce_completely(field.mul(partial.x, z_inv))
    y_aff = field.mul(partial.y, z_inv)
    state.x0 = x_aff

    # Undo the blinding with a second ladder over the 64-bit value r.
    _reset_points(state, source)

    prepared_r = (r ^ (r << 1)) & _MASK_96
    itoh_bytes = bytearray(randombytes(12, source))
    itoh_bytes[2] &= 1
    itoh64 = int.from_bytes(itoh_bytes, "little")
    itoh64_shift = (itoh64 << 1) & _MASK_96
    prepared_r ^= itoh64

    _run_ladder(state, prepared_r, itoh64_shift, 64, source)

    result = curve.compute_y_projective(
        state.xp, state.zp, state.xq, state.zq, x_aff, y_aff
    )
    x_ea, y_ea = curve.point_conversion_mp_ea(result.x, result.y, result.z)
    return curve.ed25519_encode(x_ea, y_ea)


def scalarmult_base(scalar: bytes, source: Optional[WordSource] = None) -> bytes:
    """Return the Edwards25519 encoding of ``[scalar]`` times the base point."""
    return scalarmult(scalar, curve.BASE_POINT, source)