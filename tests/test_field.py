import pytest

from sca25519 import field
from sca25519.field import P


SAMPLES = [1, 2, 9, 121666, P - 1, (1 << 255) + 7, (1 << 256) - 1, 0xDEADBEEF << 100]


def test_unpack_base_point():
    data = bytes([9] + [0] * 31)
    assert field.unpack(data) == 9


def test_unpack_ignores_top_bit():
    data = bytes([0] * 31 + [0x80])
    assert field.unpack(data) == 0


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError):
        field.unpack(bytes(31))


def test_pack_reduces_completely():
    assert field.pack(P) == bytes(32)
    assert field.pack(P + 1) == bytes([1] + [0] * 31)


@pytest.mark.parametrize("value", SAMPLES)
def test_pack_unpack_round_trip(value):
    assert field.unpack(field.pack(value)) == value % P


def test_reduce_to_256_bits_keeps_residue():
    value = (1 << 511) + (1 << 300) + 12345
    folded = field.reduce_to_256_bits(value)
    assert folded < 1 << 256
    assert folded % P == value % P


def test_reduce_to_256_bits_rejects_too_large():
    with pytest.raises(ValueError):
        field.reduce_to_256_bits(1 << 512)


def test_inputs_must_fit_256_bits():
    with pytest.raises(ValueError):
        field.add(1 << 256, 1)
    with pytest.raises(ValueError):
        field.mul(-1, 1)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES[:4])
def test_add_sub_inverse(a, b):
    assert field.sub(field.add(a, b), b) == a % P


@pytest.mark.parametrize("a", SAMPLES)
def test_neg_sums_to_zero(a):
    assert field.is_zero(field.add(a, field.neg(a)))


@pytest.mark.parametrize("a", SAMPLES)
def test_square_matches_mul(a):
    assert field.square(a) == field.mul(a, a)


@pytest.mark.parametrize("a", SAMPLES)
def test_mul121666_matches_mul(a):
    assert field.mul121666(a) == field.mul(a, 121666)


def test_mul_uint16():
    assert field.mul_uint16(P - 1, 3) == field.neg(3)
    with pytest.raises(ValueError):
        field.mul_uint16(5, 0x10000)


@pytest.mark.parametrize("a", SAMPLES)
def test_invert_round_trip(a):
    assert field.mul(a, field.invert(a)) == 1


def test_invert_zero_is_zero():
    assert field.invert(P) == 0


@pytest.mark.parametrize("a", SAMPLES)
def test_pow2523_relation(a):
    t = field.pow2523(a)
    t8 = field.square(field.square(field.square(t)))
    a5 = field.mul(field.square(field.square(a)), a)
    assert field.mul(t8, a5) == a % P


def test_sqrt_m1_squares_to_minus_one():
    assert field.square(field.SQRT_M1) == P - 1


@pytest.mark.parametrize("r", [3, 9, 121666, P - 5, 0xABCDEF << 120])
def test_squareroot_of_square(r):
    a = field.square(r)
    root = field.squareroot(a)
    assert field.square(root) == a
    assert root in (r % P, field.neg(r))


def test_squareroot_of_non_square_raises():
    with pytest.raises(ValueError):
        field.squareroot(2)


def test_is_equal_and_is_zero():
    assert field.is_equal(P + 3, 3)
    assert not field.is_equal(3, 4)
    assert field.is_zero(0)
    assert not field.is_zero(1)


def test_parity():
    assert field.parity(1) == 1
    assert field.parity(P - 1) == 0
    assert field.parity(P + 2) == 0


def test_cswap():
    assert field.cswap(5, 7, 1) == (7, 5)
    assert field.cswap(5, 7, 0) == (5, 7)
    with pytest.raises(ValueError):
        field.cswap(5, 7, 2)


def test_cmov():
    assert field.cmov(5, 7, 1) == 7
    assert field.cmov(5, 7, 0) == 5


def test_constants():
    assert field.add(field.MINUS_A, field.A) == 0
    assert field.mul(field.MINUS_A_DIV2, 2) == field.MINUS_A