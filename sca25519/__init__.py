"""Curve25519 scalar multiplication with side-channel countermeasures and Ed25519 point output."""

__version__ = "0.1.0"

__all__ = [
    "bignum",
    "randomness",
    "scalar",
    "field",
    "cswap",
    "curve",
    "scalarmult",
    "ephemeral",
    "bench",
]