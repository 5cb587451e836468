# sca25519

Scalar multiplication on Curve25519 using countermeasures against side-channel
attacks. Each result is returned as a 32-byte encoded Ed25519 point.

The package is written in pure Python and has no dependencies.

## Scalar multiplication

The package offers three variants. Each one takes a 32-byte little-endian
scalar. The general functions also take a 32-byte Montgomery u-coordinate.
The `_base` functions use the base point u = 9 instead.

- **Static (protected)**: `sca25519.scalarmult.scalarmult(scalar, point, source=None)`
  and `scalarmult_base(scalar, source=None)`. These blind the scalar
  multiplicatively with a random non-zero 64-bit value `r`. One Montgomery
  ladder computes `[s * r^-1] P` and a second ladder multiplies the result by
  `r`. Every conditional swap re-randomizes the projective coordinates. The
  scalar bits are also masked with random address bits.
- **Ephemeral**: `sca25519.ephemeral.ephemeral_scalarmult(scalar, point, source=None)`
  and `ephemeral_scalarmult_base(scalar, source=None)`. These keep the
  randomized, masked swaps but do not blind the scalar.
- **Unprotected**: `sca25519.ephemeral.unprotected_scalarmult(scalar, point)`
  and `unprotected_scalarmult_base(scalar)`. This is a plain Montgomery ladder
  over bits 254 to 0 of the scalar, so bit 255 is ignored.

Error handling is the same for all three. If the point is not on the curve,
they raise `sca25519.scalarmult.ScalarMultError`, which is a subclass of
`ValueError`. A scalar that is not 32 bytes long raises `ValueError`.

```python
from sca25519.scalarmult import scalarmult_base
from sca25519.ephemeral import ephemeral_scalarmult_base, unprotected_scalarmult_base
from sca25519.randomness import SeededWordSource

scalar = bytes(range(32))

protected = scalarmult_base(scalar)                           # system randomness
ephemeral = ephemeral_scalarmult_base(scalar, SeededWordSource(1))
reference = unprotected_scalarmult_base(scalar)
print(protected.hex(), ephemeral.hex(), reference.hex())
```

## Randomness

The protected variants take their random words from a *word source*, which is
any object with a `next_word()` method that returns a 32-bit integer.

- `sca25519.randomness.SystemWordSource` draws from the operating system's
  random generator. It is the default whenever `source` is `None`.
- `sca25519.randomness.SeededWordSource(seed)` is deterministic and meant for
  reproducible runs. Do not use it for real keys.

`sca25519.randomness.randombytes(length, source=None)` builds a byte string
out of words taken from a source.

## Building blocks

| Module | Contents |
| --- | --- |
| `sca25519.bignum` | `to_words`/`from_words`, `shift_left_one`, `shift_right_one`, `is_equal`, `greater_than`, `conditional_move`, `conditional_swap`, `is_negative`, `multiply16x32` |
| `sca25519.field` | Arithmetic modulo 2^255 - 19: `add`, `sub`, `neg`, `mul`, `square`, `mul121666`, `mul_uint16`, `invert`, `pow2523`, `squareroot`, `pack`/`unpack`, `reduce_completely`, `reduce_to_256_bits`, `is_equal`, `is_zero`, `parity`, `cswap`, `cmov` |
| `sca25519.scalar` | Arithmetic modulo the group order: `add`, `sub`, `mul`, `square`, `invert`, `reduce`, `from_32bytes`, `from_64bytes`, `to_32bytes` |
| `sca25519.cswap` | `rotate_right`, plus `cswap_and_randomize`, a conditional swap that also multiplies both field elements by a random 31-bit factor |
| `sca25519.curve` | `ProjectivePoint`, conversions between Montgomery and Edwards forms (`point_conversion_mp_ea`, `point_conversion_ea_mp`), `ed25519_encode`/`ed25519_decode`, `compute_y_affine`, `compute_y_projective`, `add_points` |
| `sca25519.scalarmult` | `LadderState` with `ladder_step()`, `mask_and_cswap`, `scalarmult`, `scalarmult_base` |

## Benchmark command

```
sca25519-bench [test | scalarmult-static | scalarmult-ephemeral | scalarmult-unprotected] [--runs N]
```

- With no operation given, the command times `scalarmult-static`.
- Each timing operation runs the chosen variant on a fixed scalar `--runs`
  times (1000 by default). It prints the mean cost per call in nanoseconds.
- `test` runs all three variants on the fixed scalar and reports
  `Test scalarmult: 0 (PASS)` if the unprotected result matches the known
  encoded point. Otherwise it reports `FAIL`.

The same checks are available from code as `sca25519.bench.check_scalarmult()`
and `sca25519.bench.measure_cost(operation, runs)`.

## What this package does not do

- It computes encoded points only. It does not create or verify Ed25519
  signatures, and it does not hash messages.
- It does not produce X25519 shared secrets. All results come out in Edwards
  encoding.
- Python's integer arithmetic does not run in constant time. The
  countermeasures follow the protected algorithm, but this code gives no
  timing guarantees.

## Running the tests

```
pip install -e ".[test]"
pytest
```