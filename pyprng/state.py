"""Algorithm-agnostic generator state and the functional draw API.

Every draw returns the value together with a new :class:`GeneratorState`;
the input state is never modified and stays valid, but stale.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from .errors import InvalidBound
from .registry import DEFAULT_ALGORITHM, Algorithm, AlgorithmHandle, resolve

LOGGER = logging.getLogger(__name__)

__all__ = [
    "GeneratorState",
    "check_bound",
    "initial_state",
    "seed",
    "uniform",
    "uniform_array",
]

_INT64_MAX = int(np.iinfo(np.int64).max)


def check_bound(n: Any) -> int:
    """Return *n* as an ``int`` or raise :class:`InvalidBound`."""

    if isinstance(n, bool):
        raise InvalidBound(n)
    try:
        bound = operator.index(n)
    except TypeError:
        raise InvalidBound(n) from None
    if bound < 1:
        raise InvalidBound(n)
    return bound


@dataclass(frozen=True, slots=True)
class GeneratorState:
    """An algorithm handle paired with that algorithm's internal state.

    Obtain instances from :func:`initial_state` or :func:`seed` rather than
    building them directly.
    """

    handle: AlgorithmHandle
    state: Any

    def __post_init__(self) -> None:
        if not isinstance(self.state, self.handle.state_type):
            raise TypeError(
                f"{self.handle.algorithm.value} expects {self.handle.state_type.__name__}, "
                f"got {type(self.state).__name__}"
            )

    @property
    def algorithm(self) -> Algorithm:
        return self.handle.algorithm

    def uniform(self, n: int | None = None) -> tuple[float | int, GeneratorState]:
        """Draw a float in ``(0, 1)`` or, when *n* is given, an int in ``[1, n]``."""

        if n is None:
            value, new = self.handle.uniform_float(self.state)
        else:
            value, new = self.handle.uniform_int(check_bound(n), self.state)
        return value, GeneratorState(self.handle, new)


def initial_state(algorithm: Algorithm | AlgorithmHandle | str | None = None) -> GeneratorState:
    """Return the fixed default state of *algorithm* (AS183 when omitted)."""

    handle = resolve(DEFAULT_ALGORITHM if algorithm is None else algorithm)
    return GeneratorState(handle, handle.initial_state())


def _seed_values(values: Sequence[Any]) -> tuple[int, int, int]:
    if len(values) != 3:
        raise TypeError(f"Expected three seed values, got {len(values)}")
    a1, a2, a3 = (operator.index(v) for v in values)
    return a1, a2, a3


def seed(*args: Any, algorithm: Algorithm | AlgorithmHandle | str | None = None) -> GeneratorState:
    """Return a state seeded from three integers.

    Accepted call forms::

        seed(a1, a2, a3)
        seed(a1, a2, a3, algorithm="sfmt19937")
        seed("sfmt19937", a1, a2, a3)
        seed((a1, a2, a3))
    """

    if len(args) == 4:
        if not isinstance(args[0], (str, Algorithm, AlgorithmHandle)):
            raise TypeError(f"seed() takes three seed values, got {len(args)} arguments")
        if algorithm is not None:
            raise TypeError("Algorithm given both positionally and by keyword")
        algorithm, *raw = args
    elif len(args) == 1 and isinstance(args[0], (tuple, list)):
        raw = list(args[0])
    elif len(args) == 3:
        raw = list(args)
    else:
        raise TypeError(f"seed() takes three seed values, got {len(args)} arguments")

    handle = resolve(DEFAULT_ALGORITHM if algorithm is None else algorithm)
    values = _seed_values(raw)
    LOGGER.debug("Seeding %s with %s", handle.algorithm.value, values)
    return GeneratorState(handle, handle.seed(values))


def uniform(*args: Any) -> tuple[float | int, GeneratorState]:
    """``uniform(state)`` draws a float, ``uniform(n, state)`` an integer in ``[1, n]``."""

    if len(args) == 1:
        (state,) = args
        n = None
    elif len(args) == 2:
        n, state = args
    else:
        raise TypeError(f"uniform() takes 1 or 2 arguments, got {len(args)}")
    if not isinstance(state, GeneratorState):
        raise TypeError(f"Expected a GeneratorState, got {type(state).__name__}")
    return state.uniform(n)


def uniform_array(
    state: GeneratorState, size: int, n: int | None = None
) -> tuple[np.ndarray, GeneratorState]:
    """Draw *size* values at once.

    Parameters
    ----------
    state:
        Starting generator state.
    size:
        Number of draws.
    n:
        Optional upper bound; when given the result holds integers in
        ``[1, n]`` instead of floats in ``(0, 1)``.

    Returns
    -------
    The values as a one dimensional :class:`numpy.ndarray` and the state after
    the last draw.  Bounds beyond the ``int64`` range yield an object array.
    """

    count = int(size)
    if count < 0:
        raise ValueError("The number of draws must not be negative")
    bound = None if n is None else check_bound(n)

    values = []
    current = state
    for _ in range(count):
        value, current = current.uniform(bound)
        values.append(value)

    if bound is None:
        return np.asarray(values, dtype=float), current
    dtype = np.int64 if bound <= _INT64_MAX else object
    return np.asarray(values, dtype=dtype), current
