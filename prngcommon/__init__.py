"""Pseudo-random number generator engines.

Each submodule implements one algorithm as pure functions over an immutable
state value: ``initial_state()``, ``seed(values)``, ``uniform_float(state)``
and ``uniform_int(n, state)``.  The engines know nothing about each other;
:mod:`pyprng` binds them behind a single interface.
"""

from . import as183, sfmt19937, tinymt32, xorshift64star, xorshift128plus, xorshift1024star
from .as183 import AS183State
from .sfmt19937 import SFMTState
from .tinymt32 import TinyMTState
from .xorshift64star import Xorshift64StarState
from .xorshift128plus import Xorshift128PlusState
from .xorshift1024star import Xorshift1024StarState

__all__ = [
    "AS183State",
    "SFMTState",
    "TinyMTState",
    "Xorshift1024StarState",
    "Xorshift128PlusState",
    "Xorshift64StarState",
    "as183",
    "sfmt19937",
    "tinymt32",
    "xorshift1024star",
    "xorshift128plus",
    "xorshift64star",
]
