"""xorshift1024* generator by Sebastiano Vigna.

The sixteen 64-bit words form a ring; ``index`` points at the current head
and moves forward by one slot per draw.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from . import xorshift64star
from .bits import MASK21, MASK64, TWO_POW_64, as_unit_float, mul64

__all__ = [
    "MULTIPLIER",
    "RING_SIZE",
    "Xorshift1024StarState",
    "advance",
    "initial_state",
    "seed",
    "uniform_float",
    "uniform_int",
]

RING_SIZE = 16
MULTIPLIER = 1181783497276652981

# 21-bit primes
SEED_PRIMES = (2097131, 2097133, 2097143)

_DEFAULT_WORDS = (
    0x0123456789ABCDEF,
    0x123456789ABCDEF0,
    0x23456789ABCDEF01,
    0x3456789ABCDEF012,
    0x456789ABCDEF0123,
    0x56789ABCDEF01234,
    0x6789ABCDEF012345,
    0x789ABCDEF0123456,
    0x89ABCDEF01234567,
    0x9ABCDEF012345678,
    0xABCDEF0123456789,
    0xBCDEF0123456789A,
    0xCDEF0123456789AB,
    0xDEF0123456789ABC,
    0xEF0123456789ABCD,
    0xF0123456789ABCDE,
)


@dataclass(frozen=True, slots=True)
class Xorshift1024StarState:
    words: tuple[int, ...]
    index: int = 0

    def __post_init__(self) -> None:
        if len(self.words) != RING_SIZE:
            raise ValueError(f"Expected {RING_SIZE} words, got {len(self.words)}")


def _combine(s0: int, s1: int) -> tuple[int, int]:
    s1 ^= (s1 << 31) & MASK64
    s1 ^= s1 >> 11
    s0 ^= s0 >> 30
    word = s0 ^ s1
    return mul64(word, MULTIPLIER), word


def advance(state: Xorshift1024StarState) -> tuple[int, Xorshift1024StarState]:
    p = state.index
    q = (p + 1) % RING_SIZE
    output, word = _combine(state.words[p], state.words[q])
    words = list(state.words)
    words[q] = word
    return output, Xorshift1024StarState(tuple(words), q)


def initial_state() -> Xorshift1024StarState:
    return Xorshift1024StarState(_DEFAULT_WORDS, 0)


def seed(values: Sequence[int]) -> Xorshift1024StarState:
    """Pack three 21-bit residues into one word and expand it with xorshift64*.

    The expansion is kept bit-compatible with previously seeded sequences:
    the last of the sixteen draws lands at the head of the ring.
    """

    b1, b2, b3 = (
        (((int(v) & MASK21) + 1) * prime) & MASK21
        for v, prime in zip(values, SEED_PRIMES)
    )
    r = (b1 << 43) | (b2 << 22) | (b3 << 1) | 1

    draws = []
    for _ in range(RING_SIZE):
        out, r = xorshift64star.next_word(r)
        draws.append(out)
    return Xorshift1024StarState(tuple(reversed(draws)), 0)


def uniform_float(state: Xorshift1024StarState) -> tuple[float, Xorshift1024StarState]:
    output, new = advance(state)
    return as_unit_float(output, TWO_POW_64), new


def uniform_int(n: int, state: Xorshift1024StarState) -> tuple[int, Xorshift1024StarState]:
    output, new = advance(state)
    return (output % n) + 1, new
