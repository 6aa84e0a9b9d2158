"""Wichmann-Hill AS183 generator.

B. A. Wichmann and I. D. Hill, "An efficient and portable pseudo-random
number generator", Journal of Applied Statistics, AS183, 1982.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

__all__ = [
    "AS183State",
    "PRIMES",
    "advance",
    "initial_state",
    "seed",
    "uniform_float",
    "uniform_int",
]

PRIMES = (30269, 30307, 30323)
MULTIPLIERS = (171, 172, 170)


@dataclass(frozen=True, slots=True)
class AS183State:
    """Three congruential streams, each in ``[1, prime - 1]``."""

    s1: int
    s2: int
    s3: int


def initial_state() -> AS183State:
    return AS183State(3172, 9814, 20125)


def seed(values: Sequence[int]) -> AS183State:
    """Normalise three integers into non-degenerate residues.

    A component that is a multiple of its prime would stay at zero forever,
    so each value is folded into ``[1, prime - 1]``.
    """

    a1, a2, a3 = (int(v) for v in values)
    p1, p2, p3 = PRIMES
    return AS183State(
        (abs(a1) % (p1 - 1)) + 1,
        (abs(a2) % (p2 - 1)) + 1,
        (abs(a3) % (p3 - 1)) + 1,
    )


def advance(state: AS183State) -> AS183State:
    p1, p2, p3 = PRIMES
    m1, m2, m3 = MULTIPLIERS
    return AS183State(
        (state.s1 * m1) % p1,
        (state.s2 * m2) % p2,
        (state.s3 * m3) % p3,
    )


def uniform_float(state: AS183State) -> tuple[float, AS183State]:
    """Return a float in ``[0, 1)`` and the advanced state."""

    new = advance(state)
    p1, p2, p3 = PRIMES
    r = new.s1 / p1 + new.s2 / p2 + new.s3 / p3
    return r - int(r), new


def uniform_int(n: int, state: AS183State) -> tuple[int, AS183State]:
    f, new = uniform_float(state)
    return min(int(f * n) + 1, n), new
