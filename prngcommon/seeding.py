"""Key-list seeding recurrence shared by the Mersenne Twister variants.

Both SFMT19937 and TinyMT32 fold a list of 32-bit integers into their state
array with the same two-pass recurrence; only the array size, the ``mid`` and
``lag`` offsets and the minimum number of first-pass steps differ.
"""

from __future__ import annotations

from typing import Sequence

from .bits import MASK32, mul32

__all__ = ["func1", "func2", "mix_key"]


def func1(x: int) -> int:
    return mul32(x ^ (x >> 27), 1664525)


def func2(x: int) -> int:
    return mul32(x ^ (x >> 27), 1566083941)


def mix_key(
    initial: Sequence[int],
    key: Sequence[int],
    *,
    mid: int,
    lag: int,
    min_count: int,
) -> list[int]:
    """Return *initial* with *key* mixed in.

    Parameters
    ----------
    initial:
        Starting contents of the state array.  The input is not modified.
    key:
        32-bit seed words.
    mid, lag:
        Offsets of the two positions updated alongside position ``i``.
    min_count:
        Minimum number of steps in the first pass.
    """

    st = [int(v) & MASK32 for v in initial]
    key = [int(k) & MASK32 for k in key]
    size = len(st)
    key_length = len(key)
    count = max(key_length + 1, min_count)

    r = func1(st[0] ^ st[mid % size] ^ st[size - 1])
    st[mid % size] = (st[mid % size] + r) & MASK32
    r = (r + key_length) & MASK32
    st[(mid + lag) % size] = (st[(mid + lag) % size] + r) & MASK32
    st[0] = r

    # first pass consumes the key, then keeps stirring without it
    i = 1
    for j in range(count - 1):
        im = (i + mid) % size
        r = func1(st[i] ^ st[im] ^ st[(i + size - 1) % size])
        st[im] = (st[im] + r) & MASK32
        extra = key[j] if j < key_length else 0
        r = (r + extra + i) & MASK32
        iml = (i + mid + lag) % size
        st[iml] = (st[iml] + r) & MASK32
        st[i] = r
        i = (i + 1) % size

    for _ in range(size):
        im = (i + mid) % size
        r = func2((st[i] + st[im] + st[(i + size - 1) % size]) & MASK32)
        st[im] ^= r
        r = (r - i) & MASK32
        st[(i + mid + lag) % size] ^= r
        st[i] = r
        i = (i + 1) % size

    return st
