"""Tiny Mersenne Twister, 32-bit variant (period ``2**127 - 1``).

Algorithm by Mutsuo Saito and Makoto Matsumoto, see
http://www.math.sci.hiroshima-u.ac.jp/~m-mat/MT/TINYMT/index.html
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Sequence

from .bits import MASK32, TWO_POW_32
from .seeding import mix_key

LOGGER = logging.getLogger(__name__)

__all__ = [
    "TinyMTState",
    "advance",
    "generate_uint32",
    "init_by_array",
    "initial_state",
    "period_certification",
    "seed",
    "temper",
    "uniform_float",
    "uniform_int",
]

SH0 = 1
SH1 = 10
SH8 = 8
MIN_LOOP = 8
PRE_LOOP = 8
LAG = 1
MID = 1
SIZE = 4

_RESCUE = (ord("T"), ord("I"), ord("N"), ord("Y"))


@dataclass(frozen=True, slots=True)
class TinyMTState:
    """127 bits of status plus the three fixed parameter words."""

    status0: int
    status1: int
    status2: int
    status3: int
    mat1: int
    mat2: int
    tmat: int

    @property
    def status(self) -> tuple[int, int, int, int]:
        return (self.status0, self.status1, self.status2, self.status3)


def advance(state: TinyMTState) -> TinyMTState:
    """Advance the status words one step; no output is produced."""

    y = state.status3
    x = (state.status0 ^ state.status1 ^ state.status2) & MASK32
    x ^= (x << SH0) & MASK32
    y ^= (y >> SH0) ^ x
    status2 = (x ^ (y << SH1)) & MASK32
    mask = -(y & 1) & MASK32
    return replace(
        state,
        status0=state.status1,
        status1=state.status2 ^ (state.mat1 & mask),
        status2=status2 ^ (state.mat2 & mask),
        status3=y,
    )


def temper(state: TinyMTState) -> int:
    """Turn the current status into a 32-bit output word."""

    t0 = state.status3
    t1 = (state.status0 + (state.status2 >> SH8)) & MASK32
    mask = -(t1 & 1) & MASK32
    return t0 ^ t1 ^ (state.tmat & mask)


def generate_uint32(state: TinyMTState) -> tuple[int, TinyMTState]:
    new = advance(state)
    return temper(new), new


def period_certification(state: TinyMTState) -> TinyMTState:
    """Replace the two all-zero-equivalent status patterns with a fixed one."""

    if state.status in ((0, 0, 0, 0), (0x80000000, 0, 0, 0)):
        LOGGER.debug("TinyMT status %s is degenerate, using rescue constant", state.status)
        s0, s1, s2, s3 = _RESCUE
        return replace(state, status0=s0, status1=s1, status2=s2, status3=s3)
    return state


def init_by_array(params: TinyMTState, key: Sequence[int]) -> TinyMTState:
    """Seed the status words from *key*, keeping the parameters of *params*."""

    initial = [0, params.mat1, params.mat2, params.tmat]
    s0, s1, s2, s3 = mix_key(initial, key, mid=MID, lag=LAG, min_count=MIN_LOOP)
    state = period_certification(
        replace(params, status0=s0, status1=s1, status2=s2, status3=s3)
    )
    for _ in range(PRE_LOOP):
        state = advance(state)
    return state


def initial_state() -> TinyMTState:
    return TinyMTState(
        status0=297425621,
        status1=2108342699,
        status2=4290625991,
        status3=2232209075,
        mat1=2406486510,
        mat2=4235788063,
        tmat=932445695,
    )


def seed(values: Sequence[int]) -> TinyMTState:
    return init_by_array(initial_state(), [int(v) & MASK32 for v in values])


def uniform_float(state: TinyMTState) -> tuple[float, TinyMTState]:
    word, new = generate_uint32(state)
    return (word + 0.5) / TWO_POW_32, new


def uniform_int(n: int, state: TinyMTState) -> tuple[int, TinyMTState]:
    word, new = generate_uint32(state)
    return (word % n) + 1, new
