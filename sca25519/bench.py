"""Self-check and timing of the three scalar multiplication variants."""

from __future__ import annotations

import argparse
import time
from functools import partial
from typing import Callable, Optional, Sequence

from .ephemeral import ephemeral_scalarmult_base, unprotected_scalarmult_base
from .scalarmult import ScalarMultError, scalarmult_base

DEFAULT_RUNS = 1000

SCALAR = bytes(
    [
        0xFB, 0x01, 0x0C, 0x01, 0xC2, 0xDD, 0x90, 0xC0,
        0x7D, 0xC7, 0xF5, 0x42, 0xF4, 0x03, 0x8A, 0xDA,
        0x89, 0xEE, 0x1E, 0xC4, 0xD7, 0x42, 0x93, 0xDE,
        0x4F, 0x43, 0xED, 0x6D, 0x57, 0xCA, 0x1C, 0x0F,
    ]
)

EXPECTED_R = bytes(
    [
        0x4F, 0x30, 0x16, 0x0A, 0xA7, 0x6C, 0xA6, 0xDE,
        0xB6, 0x28, 0xE2, 0x95, 0x07, 0xFE, 0x23, 0x5D,
        0x64, 0xC8, 0x75, 0x0C, 0xDC, 0x67, 0xB7, 0x9A,
        0x81, 0xE5, 0x26, 0x5D, 0x46, 0xC7, 0x04, 0x85,
    ]
)

# name -> (label used in messages, operation on the fixed scalar)
_OPERATIONS: dict[str, tuple[str, Callable[[], object]]] = {
    "scalarmult-static": ("static", partial(scalarmult_base, SCALAR)),
    "scalarmult-ephemeral": ("ephemeral", partial(ephemeral_scalarmult_base, SCALAR)),
    "scalarmult-unprotected": (
        "unprotected",
        partial(unprotected_scalarmult_base, SCALAR),
    ),
}


def check_scalarmult() -> bool:
    """Run all three variants on the fixed scalar and compare with the known result.

    Every variant must succeed; the unprotected result is compared with
    ``EXPECTED_R``.
    """
    try:
        scalarmult_base(SCALAR)
        ephemeral_scalarmult_base(SCALAR)
        result = unprotected_scalarmult_base(SCALAR)
    except ScalarMultError:
        return False
    return result == EXPECTED_R


def measure_cost(operation: Callable[[], object], runs: int) -> int:
    """Call ``operation`` ``runs`` times and return the mean cost in nanoseconds."""
    if runs < 1:
        raise ValueError("runs must be at least 1")
    total = 0
    for _ in range(runs):
        start = time.perf_counter_ns()
        operation()
        total += time.perf_counter_ns() - start
    return total // runs


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the self-check or time one scalar multiplication variant."""
    parser = argparse.ArgumentParser(
        prog="sca25519-bench",
        description="Check or time the Curve25519 scalar multiplications.",
    )
    parser.add_argument(
        "operation",
        nargs="?",
        default="scalarmult-static",
        choices=["test", *_OPERATIONS],
        help="what to run (default: scalarmult-static)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=DEFAULT_RUNS,
        help=f"number of measured runs (default: {DEFAULT_RUNS})",
    )
    args = parser.parse_args(argv)
    if args.runs < 1:
        parser.error("--runs must be at least 1")

    print("Program started.")
    if args.operation == "test":
        status = "0 (PASS)" if check_scalarmult() else "FAIL"
        print(f"Test scalarmult: {status}")
    else:
        label, operation = _OPERATIONS[args.operation]
        print(f"Measuring {label} scalar multiplication, this can take few minutes.")
        cost = measure_cost(operation, args.runs)
        print(f"{label.capitalize()} scalar multiplication cost: {cost}")
    print("Done!")
    return 0