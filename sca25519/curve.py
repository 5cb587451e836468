"""Points on Curve25519 and their conversion to and from Edwards25519.

Montgomery curve: ``y**2 = x**3 + 486662 * x**2 + x``.
Edwards curve: ``-x**2 + y**2 = 1 + d * x**2 * y**2``.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import bignum, field

CURVE_A = field.A

# The negative square root of -486662 - 2, used to map between the curves.
SCALING_FACTOR = int.from_bytes(
    bytes(
        [
            0xE7, 0x81, 0xBA, 0x00, 0x55, 0xFB, 0x91, 0x33,
            0x7D, 0xE5, 0x82, 0xB4, 0x2E, 0x2C, 0x5E, 0x3A,
            0x81, 0xB0, 0x03, 0xFC, 0x23, 0xF7, 0x84, 0x2D,
            0x44, 0xF9, 0x5F, 0x9F, 0x0B, 0x12, 0xD9, 0x70,
        ]
    ),
    "little",
)

# d of Edwards25519, -(121665 / 121666).
ED25519_D = int.from_bytes(
    bytes(
        [
            0xA3, 0x78, 0x59, 0x13, 0xCA, 0x4D, 0xEB, 0x75,
            0xAB, 0xD8, 0x41, 0x41, 0x4D, 0x0A, 0x70, 0x00,
            0x98, 0xE8, 0x79, 0x77, 0x79, 0x40, 0xC7, 0x8C,
            0x73, 0xFE, 0x6F, 0x2B, 0xEE, 0x6C, 0x03, 0x52,
        ]
    ),
    "little",
)

BASE_POINT = bytes([9]) + bytes(31)


@dataclass(frozen=True)
class ProjectivePoint:
    """A Montgomery point in projective coordinates ``(X : Y : Z)``."""

    x: int
    y: int
    z: int


def point_conversion_mp_ea(u: int, v: int, w: int) -> tuple[int, int]:
    """Map a Montgomery projective point ``(U : V : W)`` to Edwards affine."""
    u_add_w = field.add(u, w)
    r = field.invert(field.mul(v, u_add_w))
    x = field.mul(field.mul(field.mul(u, r), u_add_w), SCALING_FACTOR)
    y = field.mul(field.sub(u, w), field.mul(r, v))
    return field.reduce_completely(x), field.reduce_completely(y)


def point_conversion_ea_mp(x: int, y: int) -> tuple[int, int, int]:
    """Map an Edwards affine point to Montgomery projective ``(U, V, 1)``."""
    one_minus_y = field.sub(field.ONE, y)
    one_plus_y = field.add(field.ONE, y)
    u = field.mul(one_plus_y, field.invert(one_minus_y))
    v = field.mul(field.mul(u, field.invert(x)), SCALING_FACTOR)
    return field.reduce_completely(u), field.reduce_completely(v), field.ONE


def ed25519_decode(data: bytes) -> tuple[int, int]:
    """Decode a 32-byte Edwards25519 point into affine ``(x, y)``.

    The sign of ``x`` is taken from bit 255. Raises ValueError when the
    encoded ``y`` does not belong to a point on the curve.
    """
    data = bytes(data)
    y = field.unpack(data)
    sign = data[31] >> 7

    y2 = field.square(y)
    num = field.sub(y2, field.ONE)
    den = field.add(field.mul(ED25519_D, y2), field.ONE)

    den2 = field.square(den)
    den6 = field.mul(field.square(den2), den2)
    t = field.pow2523(field.mul(field.mul(den6, num), den))

    den3 = field.mul(den2, den)
    x = field.mul(field.mul(t, num), den3)

    if not field.is_equal(field.mul(field.square(x), den), num):
        x = field.mul(x, field.SQRT_M1)
    if not field.is_equal(field.mul(field.square(x), den), num):
        raise ValueError("encoding does not describe a point on the curve")

    if field.parity(x) != sign:
        x = field.neg(x)
    return field.reduce_completely(x), y


def ed25519_encode(x: int, y: int) -> bytes:
    """Encode affine ``(x, y)``: the bytes of ``y`` with bit 255 set to x's low bit."""
    if not 0 <= x <= bignum.MASK_256 or not 0 <= y <= bignum.MASK_256:
        raise ValueError("coordinate does not fit in 256 bits")
    value = (y & ~(1 << 255)) | ((x & 1) << 255)
    return value.to_bytes(32, "little")


def add_points(p: ProjectivePoint, q: ProjectivePoint) -> ProjectivePoint:
    """Add two distinct Montgomery points given in projective coordinates."""
    y2z1 = field.mul(q.y, p.z)
    y1z2 = field.mul(p.y, q.z)
    z1z2 = field.mul(p.z, q.z)
    x2z1 = field.mul(q.x, p.z)
    x1z2 = field.mul(p.x, q.z)

    dy = field.sub(y2z1, y1z2)
    dx = field.sub(x2z1, x1z2)
    x_sum = field.add(x1z2, x2z1)

    aa = field.mul(field.mul(field.square(dy), dx), z1z2)
    bb = field.mul(CURVE_A, z1z2)
    cc = field.add(field.add(x_sum, x1z2), bb)

    dx2 = field.square(dx)
    dx3 = field.mul(dx2, dx)
    dd = field.mul(field.mul(dx2, dy), cc)

    bb = field.mul(field.add(field.add(bb, x2z1), x1z2), dx3)
    rx = field.sub(aa, bb)

    dy3 = field.mul(field.square(dy), dy)
    ry = field.sub(field.sub(dd, field.mul(dy3, z1z2)), field.mul(y1z2, dx3))
    rz = field.mul(z1z2, dx3)
    return ProjectivePoint(rx, ry, rz)


def compute_y_affine(x: int) -> int:
    """Return a y with ``(x, y)`` on the Montgomery curve.

    Raises ValueError when no such y exists.
    """
    x2 = field.square(x)
    rhs = field.add(field.add(field.mul(x2, x), field.mul(x2, CURVE_A)), x)
    return field.squareroot(rhs)


def compute_y_projective(
    x1: int, z1: int, x2: int, z2: int, x: int, y: int
) -> ProjectivePoint:
    """Recover the full projective point ``k * P`` from the ladder output.

    ``(x1 : z1)`` is ``k * P``, ``(x2 : z2)`` is ``(k + 1) * P`` and ``(x, y)``
    is the affine point ``P``.
    """
    v1 = field.mul(x, z1)
    v2 = field.add(x1, v1)
    v3 = field.mul(field.square(field.sub(x1, v1)), x2)

    v1 = field.mul(field.add(CURVE_A, CURVE_A), z1)
    v2 = field.add(v2, v1)
    v4 = field.add(field.mul(x, x1), z1)
    v2 = field.mul(v2, v4)

    v1 = field.mul(v1, z1)
    v2 = field.mul(field.sub(v2, v1), z2)
    y_out = field.sub(v2, v3)

    v1 = field.mul(field.mul(field.add(y, y), z1), z2)
    return ProjectivePoint(field.mul(v1, x1), y_out, field.mul(v1, z1))