import random

import pytest

from sca25519 import field
from sca25519.cswap import cswap_and_randomize, rotate_right


def test_rotate_right_one_bit_moves_low_bit_to_top():
    assert rotate_right(1, 1) == 0x80000000


def test_rotate_right_by_byte():
    assert rotate_right(0x12345678, 8) == 0x78123456


def test_rotate_right_zero_is_identity():
    assert rotate_right(0xDEADBEEF, 0) == 0xDEADBEEF


@pytest.mark.parametrize("count", range(1, 32))
def test_rotate_right_round_trip(count):
    value = 0xA5C3F00F
    assert rotate_right(rotate_right(value, count), 32 - count) == value


@pytest.mark.parametrize("count", [-1, 32, 40])
def test_rotate_right_rejects_bad_count(count):
    with pytest.raises(ValueError):
        rotate_right(5, count)


def test_no_swap_with_unit_multiplier_is_exact():
    fe1 = (1 << 254) + 12345
    fe2 = 987654321 << 100
    assert cswap_and_randomize(0, fe1, fe2, 0) == (fe1, fe2)


def test_swap_with_unit_multiplier_is_exact():
    fe1 = (1 << 254) + 12345
    fe2 = 987654321 << 100
    assert cswap_and_randomize(1, fe1, fe2, 0) == (fe2, fe1)


def test_random_upper_swap_bits_do_not_matter():
    fe1 = (1 << 200) + 77
    fe2 = (1 << 180) + 99
    rng = random.Random(7)
    for bit in (0, 1):
        reference = cswap_and_randomize(bit, fe1, fe2, 0)
        for _ in range(20):
            noise = rng.getrandbits(32) & ~1
            assert cswap_and_randomize(noise | bit, fe1, fe2, 0) == reference


def test_top_bit_is_folded_back_modulo_p():
    fe1 = (1 << 256) - 1
    fe2 = 3
    out1, out2 = cswap_and_randomize(0, fe1, fe2, 0)
    assert out1 < 1 << 256
    assert field.is_equal(out1, fe1 % field.P)
    assert out2 == fe2


@pytest.mark.parametrize("swap", [0, 1])
def test_both_outputs_share_one_random_factor(swap):
    rng = random.Random(11 + swap)
    for _ in range(25):
        fe1 = rng.getrandbits(256)
        fe2 = rng.getrandbits(256)
        swap_data = (rng.getrandbits(32) & ~1) | swap
        out1, out2 = cswap_and_randomize(swap_data, fe1, fe2, rng.getrandbits(32))
        assert out1 < 1 << 256 and out2 < 1 << 256
        sel1, sel2 = (fe2, fe1) if swap else (fe1, fe2)
        assert field.mul(out1 % field.P, sel2 % field.P) == field.mul(
            out2 % field.P, sel1 % field.P
        )


def test_randomised_output_is_nonzero_multiple():
    fe1 = 5
    fe2 = 7
    out1, out2 = cswap_and_randomize(0, fe1, fe2, 0x12345678)
    ratio1 = field.mul(out1, field.invert(fe1))
    ratio2 = field.mul(out2, field.invert(fe2))
    assert ratio1 == ratio2
    assert ratio1 != 0


def test_rejects_oversized_element():
    with pytest.raises(ValueError):
        cswap_and_randomize(0, 1 << 256, 1, 0)