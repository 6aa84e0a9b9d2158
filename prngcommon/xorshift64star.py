"""xorshift64* generator by Sebastiano Vigna.

Reference: http://xorshift.di.unimi.it/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .bits import MASK32, MASK64, TWO_POW_64, as_unit_float, mul64

__all__ = [
    "MULTIPLIER",
    "Xorshift64StarState",
    "advance",
    "initial_state",
    "next_word",
    "seed",
    "uniform_float",
    "uniform_int",
]

MULTIPLIER = 2685821657736338717

# 32-bit primes used to spread the seed values
SEED_PRIMES = (4294967197, 4294967231, 4294967279)


@dataclass(frozen=True, slots=True)
class Xorshift64StarState:
    """A single 64-bit register. Zero is absorbing and never produced by seeding."""

    word: int


def next_word(r: int) -> tuple[int, int]:
    """Advance the raw register *r* once.

    Returns the star-multiplied output and the new register value.
    """

    r ^= r >> 12
    r ^= (r << 25) & MASK64
    r ^= r >> 27
    return mul64(r, MULTIPLIER), r


def advance(state: Xorshift64StarState) -> tuple[int, Xorshift64StarState]:
    output, word = next_word(state.word)
    return output, Xorshift64StarState(word)


def initial_state() -> Xorshift64StarState:
    return Xorshift64StarState(1234567890123456789)


def seed(values: Sequence[int]) -> Xorshift64StarState:
    """Combine three independently primed registers into one non-zero word."""

    outputs = []
    for value, prime in zip(values, SEED_PRIMES):
        out, _ = next_word((int(value) & MASK32) * prime + 1)
        outputs.append(out)
    v1, v2, v3 = outputs
    return Xorshift64StarState(((v1 * v2 * v3) % (MASK64 - 1)) + 1)


def uniform_float(state: Xorshift64StarState) -> tuple[float, Xorshift64StarState]:
    output, new = advance(state)
    return as_unit_float(output, TWO_POW_64), new


def uniform_int(n: int, state: Xorshift64StarState) -> tuple[int, Xorshift64StarState]:
    output, new = advance(state)
    return (output % n) + 1, new
