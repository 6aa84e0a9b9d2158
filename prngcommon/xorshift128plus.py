"""xorshift128+ generator by Sebastiano Vigna."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .bits import MASK64, TWO_POW_64, as_unit_float

__all__ = [
    "Xorshift128PlusState",
    "advance",
    "initial_state",
    "seed",
    "uniform_float",
    "uniform_int",
]

# 32-bit primes used to spread the seed values
SEED_PRIMES = (4294967197, 4294967231, 4294967279)


@dataclass(frozen=True, slots=True)
class Xorshift128PlusState:
    s0: int
    s1: int


def advance(state: Xorshift128PlusState) -> tuple[int, Xorshift128PlusState]:
    """One step of the shift-xor transition; the output is the sum of the halves."""

    s1 = state.s0
    s0 = state.s1
    s1 = (s1 ^ (s1 << 23)) & MASK64
    new_s1 = s1 ^ s0 ^ (s1 >> 17) ^ (s0 >> 26)
    return (s0 + new_s1) & MASK64, Xorshift128PlusState(s0, new_s1)


def initial_state() -> Xorshift128PlusState:
    return Xorshift128PlusState(1234567890123456789, 9876543210987654321)


def seed(values: Sequence[int]) -> Xorshift128PlusState:
    a1, a2, a3 = (int(v) for v in values)
    p1, p2, p3 = SEED_PRIMES
    _, first = advance(
        Xorshift128PlusState((a1 * p1 + 1) & MASK64, (a2 * p2 + 1) & MASK64)
    )
    _, second = advance(Xorshift128PlusState((a3 * p3 + 1) & MASK64, first.s1))
    if second.s0 == 0 and second.s1 == 0:
        return initial_state()
    return second


def uniform_float(state: Xorshift128PlusState) -> tuple[float, Xorshift128PlusState]:
    output, new = advance(state)
    return as_unit_float(output, TWO_POW_64), new


def uniform_int(n: int, state: Xorshift128PlusState) -> tuple[int, Xorshift128PlusState]:
    output, new = advance(state)
    return (output % n) + 1, new
