"""SIMD-oriented Fast Mersenne Twister, SFMT19937 (period ``2**19937 - 1``).

Algorithm by Mutsuo Saito and Makoto Matsumoto, see
http://www.math.sci.hiroshima-u.ac.jp/~m-mat/MT/SFMT/

The 128-bit lanes are rows of four little-endian ``uint32`` words.  The
state array doubles as the output buffer: after a refill pass the 624 words
are handed out one at a time until ``index`` reaches the end again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from .bits import MASK32, TWO_POW_32, lshift128, parity32, rshift128
from .seeding import mix_key

LOGGER = logging.getLogger(__name__)

__all__ = [
    "IDSTR",
    "N32",
    "SFMTState",
    "gen_rand32",
    "gen_rand_all",
    "init_by_array",
    "init_gen_rand",
    "initial_state",
    "period_certification",
    "seed",
    "uniform_float",
    "uniform_int",
]

MEXP = 19937
N = MEXP // 128 + 1
N32 = N * 4
POS1 = 122
SL1 = 18
SL2 = 1
SR1 = 11
SR2 = 1
MSK = (0xDFFFFFEF, 0xDDFECB7F, 0xBFFAFFFF, 0xBFFFFFF6)
_MSK = np.array(MSK, dtype=np.uint32)
PARITY = (0x00000001, 0x00000000, 0x00000000, 0x13C9E684)
LAG = 11
MID = 306
IDSTR = "SFMT-19937:122-18-1-11-1:dfffffef-ddfecb7f-bffaffff-bffffff6"

DEFAULT_SEED = 1234


def _freeze(words: Sequence[int] | np.ndarray) -> np.ndarray:
    arr = np.array(words, dtype=np.uint32)
    if arr.shape != (N32,):
        raise ValueError(f"SFMT state must hold {N32} words, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, slots=True, eq=False)
class SFMTState:
    """Internal array of 624 words plus the cursor of the next output word.

    ``index == N32`` marks an exhausted buffer; the next draw refills it.
    """

    words: np.ndarray
    index: int = N32

    def __post_init__(self) -> None:
        words = self.words
        if not (
            isinstance(words, np.ndarray)
            and words.dtype == np.uint32
            and not words.flags.writeable
        ):
            object.__setattr__(self, "words", _freeze(words))
        if not 0 <= self.index <= N32:
            raise ValueError(f"SFMT index out of range: {self.index}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SFMTState):
            return NotImplemented
        return self.index == other.index and bool(np.array_equal(self.words, other.words))


def _feed_forward(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a ^ lshift128(a, SL2) ^ ((b >> np.uint32(SR1)) & _MSK)


def _feedback(c: np.ndarray, d: np.ndarray) -> np.ndarray:
    return rshift128(c, SR2) ^ (d << np.uint32(SL1))


def do_recursion(a: ArrayLike, b: ArrayLike, c: ArrayLike, d: ArrayLike) -> np.ndarray:
    """Compute one new lane from four lanes of the state.

    Each argument holds four ``uint32`` words along its last axis.
    """

    a, b, c, d = (np.asarray(x, dtype=np.uint32) for x in (a, b, c, d))
    return _feed_forward(a, b) ^ _feedback(c, d)


def gen_rand_all(words: Sequence[int] | np.ndarray) -> np.ndarray:
    """Run one full pass of the recurrence and return the new state array.

    Lane ``i`` reads lane ``i + POS1`` (mod N), so lanes are refreshed in
    blocks of ``N - POS1``: the feed-forward terms of a whole block are known
    up front and only the feedback from the two previous lanes runs lane by
    lane.
    """

    w = np.array(words, dtype=np.uint32).reshape(N, 4)
    r1 = w[N - 2].copy()
    r2 = w[N - 1].copy()
    step = N - POS1
    for start in range(0, N, step):
        stop = min(start + step, N)
        head = _feed_forward(w[start:stop], w[(np.arange(start, stop) + POS1) % N])
        for k in range(stop - start):
            lane = head[k] ^ _feedback(r1, r2)
            w[start + k] = lane
            r1, r2 = r2, lane
    return _freeze(w.reshape(N32))


def period_certification(words: Sequence[int]) -> list[int]:
    """Return *words* adjusted so the generator reaches its full period.

    The inner product of the first four words with the parity vector must be
    odd.  When it is even, the lowest bit set in the parity vector is flipped.
    """

    w = [int(v) & MASK32 for v in words]
    inner = 0
    for k in range(4):
        inner ^= w[k] & PARITY[k]
    if parity32(inner):
        return w

    for k in range(4):
        work = 1
        for bit in range(32):
            if work & PARITY[k]:
                w[k] ^= work
                LOGGER.debug("Period certification flipped bit %d of word %d", bit, k)
                return w
            work <<= 1
    return w


def init_gen_rand(seed_value: int) -> SFMTState:
    """Seed from a single integer.

    As in the reference C code the buffer starts exhausted, so the first
    :func:`gen_rand32` runs a refill pass before returning anything.
    """

    w = [int(seed_value) & MASK32]
    for i in range(1, N32):
        prev = w[-1]
        w.append((1812433253 * (prev ^ (prev >> 30)) + i) & MASK32)
    return SFMTState(_freeze(period_certification(w)), N32)


def init_by_array(key: Sequence[int]) -> SFMTState:
    """Seed from a list of 32-bit integers; the buffer starts exhausted."""

    w = mix_key([0x8B8B8B8B] * N32, key, mid=MID, lag=LAG, min_count=N32)
    return SFMTState(_freeze(period_certification(w)), N32)


def gen_rand32(state: SFMTState) -> tuple[int, SFMTState]:
    """Return the next 32-bit output word and the advanced state."""

    if state.index >= N32:
        words = gen_rand_all(state.words)
        index = 0
    else:
        words = state.words
        index = state.index
    return int(words[index]), SFMTState(words, index + 1)


def _key_word(value: int) -> int:
    # remainder truncated toward zero, so negative values keep their sign
    v = int(value) + 1
    r = abs(v) % MASK32
    return (r if v >= 0 else -r) & MASK32


def initial_state() -> SFMTState:
    """The certified array of ``init_gen_rand(1234)``, read from its first word.

    The generator states built by :func:`initial_state` and :func:`seed` hand
    out the seeded words themselves before the first refill.
    """

    return SFMTState(init_gen_rand(DEFAULT_SEED).words, 0)


def seed(values: Sequence[int]) -> SFMTState:
    return SFMTState(init_by_array([_key_word(v) for v in values]).words, 0)


def uniform_float(state: SFMTState) -> tuple[float, SFMTState]:
    word, new = gen_rand32(state)
    return (word + 0.5) / TWO_POW_32, new


def uniform_int(n: int, state: SFMTState) -> tuple[int, SFMTState]:
    word, new = gen_rand32(state)
    return min(int(word / TWO_POW_32 * n) + 1, n), new
