"""Conditional swap of two field elements fused with projective randomisation.

The swap is driven by bit 0 of a swap word whose other bits carry random
data. Both elements come back multiplied by the same random 31-bit factor,
with the part above bit 254 folded back in, so each result stays congruent
modulo ``2**255 - 19`` to a random multiple of the element it selected.
"""

from __future__ import annotations

from . import bignum

_WORD = bignum.WORD_MASK
_SWAP_MASK = 0xFFFF0001
_RANDOM_CLIP = 0x7FFF7FFF


def rotate_right(value: int, count: int) -> int:
    """Rotate the 32-bit ``value`` right by ``count`` bits (0 to 31)."""
    if not 0 <= count <= 31:
        raise ValueError("rotation count must be between 0 and 31")
    value &= _WORD
    if count == 0:
        return value
    return ((value >> count) | (value << (32 - count))) & _WORD


def _select_word(in1: int, in2: int, mask1: int, mask2: int) -> tuple[int, int]:
    """Select one 32-bit word of each output half-word by half-word.

    Only the low bit of each mask decides which input lands in the low half;
    the random upper mask bits only disturb bits that are thrown away.
    """
    low_a = (in1 * mask2 + in2 * mask1) & 0xFFFF
    low_b = (in1 * mask1 + in2 * mask2) & 0xFFFF
    rot1 = rotate_right(in1, 16)
    rot2 = rotate_right(in2, 16)
    high_a = (((rot1 * mask2 + rot2 * mask1) & _WORD) << 16) & _WORD
    high_b = (((rot1 * mask1 + rot2 * mask2) & _WORD) << 16) & _WORD
    return low_a | high_a, low_b | high_b


def cswap_and_randomize(
    swap_data: int, fe1: int, fe2: int, random_val: int
) -> tuple[int, int]:
    """Swap ``fe1`` and ``fe2`` when bit 0 of ``swap_data`` is set.

    Both outputs are multiplied by ``(random_val & 0x7fff7fff) | 1`` and
    partially reduced, so they fit in 256 bits.
    """
    swap_data &= _WORD
    multiplier = (random_val & _RANDOM_CLIP) | 1
    mask2 = (multiplier ^ swap_data) & _SWAP_MASK
    mask1 = swap_data & _SWAP_MASK

    words1 = bignum.to_words(fe1, 8)
    words2 = bignum.to_words(fe2, 8)

    top_a, top_b = _select_word(words1[7], words2[7], mask1, mask2)
    scaled_a = multiplier * top_a
    scaled_b = multiplier * top_b
    top_a = scaled_a & 0x7FFFFFFF
    top_b = scaled_b & 0x7FFFFFFF
    carry_a = (scaled_a >> 31) * 19
    carry_b = (scaled_b >> 31) * 19

    out_a: list[int] = []
    out_b: list[int] = []
    for in1, in2 in zip(words1[:7], words2[:7]):
        word_a, word_b = _select_word(in1, in2, mask1, mask2)
        scaled_a = carry_a + multiplier * word_a
        scaled_b = carry_b + multiplier * word_b
        out_a.append(scaled_a & _WORD)
        out_b.append(scaled_b & _WORD)
        carry_a = scaled_a >> 32
        carry_b = scaled_b >> 32

    out_a.append((top_a + carry_a) & _WORD)
    out_b.append((top_b + carry_b) & _WORD)
    return bignum.from_words(out_a), bignum.from_words(out_b)