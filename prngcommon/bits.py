"""Fixed-width unsigned arithmetic shared by the generator engines.

Python integers are unbounded, so every shift or multiply that may carry
past the register width is followed by an explicit mask.  The SFMT lane
shifts work on numpy ``uint32`` arrays instead, where the width is fixed by
the dtype.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "MASK21",
    "MASK32",
    "MASK64",
    "TWO_POW_32",
    "TWO_POW_64",
    "as_unit_float",
    "lshift128",
    "mul32",
    "mul64",
    "parity32",
    "rshift128",
]

MASK21 = 0x1FFFFF
MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

TWO_POW_32 = 4294967296.0
TWO_POW_64 = 18446744073709551616.0

_BELOW_ONE = math.nextafter(1.0, 0.0)


def mul32(a: int, b: int) -> int:
    """Multiply modulo ``2**32``."""

    return (a * b) & MASK32


def mul64(a: int, b: int) -> int:
    """Multiply modulo ``2**64``."""

    return (a * b) & MASK64


def lshift128(lanes: ArrayLike, nbytes: int) -> np.ndarray:
    """Shift 128-bit lanes left by *nbytes* whole bytes.

    *lanes* holds four little-endian ``uint32`` words along its last axis, so
    a single lane and a block of lanes shift the same way.
    """

    lanes = np.asarray(lanes, dtype=np.uint32)
    out = lanes << np.uint32(nbytes * 8)
    out[..., 1:] |= lanes[..., :-1] >> np.uint32(32 - nbytes * 8)
    return out


def rshift128(lanes: ArrayLike, nbytes: int) -> np.ndarray:
    """Shift 128-bit lanes right by *nbytes* whole bytes."""

    lanes = np.asarray(lanes, dtype=np.uint32)
    out = lanes >> np.uint32(nbytes * 8)
    out[..., :-1] |= lanes[..., 1:] << np.uint32(32 - nbytes * 8)
    return out


def parity32(x: int) -> int:
    """Return 1 when *x* has an odd number of set bits, else 0."""

    x &= MASK32
    x ^= x >> 16
    x ^= x >> 8
    x ^= x >> 4
    x ^= x >> 2
    x ^= x >> 1
    return x & 1


def as_unit_float(value: int, scale: float) -> float:
    """Return ``value / scale`` kept strictly below 1.0.

    Dividing a 64-bit word close to ``2**64`` rounds up to exactly 1.0 in
    double precision; such results are pulled down to the largest double
    below one.
    """

    result = value / scale
    if result >= 1.0:
        return _BELOW_ONE
    return result
