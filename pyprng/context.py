"""Stateful wrappers around :class:`~pyprng.state.GeneratorState`.

:class:`RandomContext` is an explicit object owning one generator state.  The
``ambient_*`` helpers keep one such context per thread so that callers which
never seed still get a deterministic generator; no thread ever sees another
thread's context.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .registry import Algorithm, AlgorithmHandle
from .state import GeneratorState, initial_state, seed, uniform_array

LOGGER = logging.getLogger(__name__)

__all__ = [
    "RandomContext",
    "ambient_context",
    "ambient_reset",
    "ambient_seed",
    "ambient_state",
    "ambient_uniform",
]


@dataclass(slots=True)
class RandomContext:
    """Mutable holder threading a generator state between draws."""

    state: GeneratorState = field(default_factory=initial_state)

    @classmethod
    def for_algorithm(cls, algorithm: Algorithm | AlgorithmHandle | str) -> RandomContext:
        return cls(initial_state(algorithm))

    @property
    def algorithm(self) -> Algorithm:
        return self.state.algorithm

    def uniform(self, n: int | None = None) -> float | int:
        value, self.state = self.state.uniform(n)
        return value

    def rand(self, size: int) -> np.ndarray:
        """Vector of *size* floats in ``(0, 1)``."""

        values, self.state = uniform_array(self.state, size)
        return values

    def randint(self, n: int, size: int) -> np.ndarray:
        """Vector of *size* integers in ``[1, n]``."""

        values, self.state = uniform_array(self.state, size, n)
        return values

    def seed(
        self, *args: Any, algorithm: Algorithm | AlgorithmHandle | str | None = None
    ) -> GeneratorState:
        """Reseed and return the previous state.

        Takes the same arguments as :func:`pyprng.state.seed`, or a single
        saved :class:`GeneratorState` which is installed as is.  Without an
        explicit algorithm the context keeps its current one.
        """

        previous = self.state
        if len(args) == 1 and isinstance(args[0], GeneratorState):
            if algorithm is not None:
                raise TypeError("A saved state already carries its algorithm")
            self.state = args[0]
            return previous
        if algorithm is None and len(args) != 4:
            algorithm = self.state.handle
        self.state = seed(*args, algorithm=algorithm)
        return previous

    def reset(self, algorithm: Algorithm | AlgorithmHandle | str | None = None) -> GeneratorState:
        """Restore the default state and return the previous one."""

        previous = self.state
        self.state = initial_state(self.state.handle if algorithm is None else algorithm)
        return previous


_LOCAL = threading.local()


def _current() -> RandomContext | None:
    return getattr(_LOCAL, "context", None)


def ambient_context() -> RandomContext:
    """Return this thread's context, creating it on first use."""

    context = _current()
    if context is None:
        context = RandomContext()
        _LOCAL.context = context
        LOGGER.debug(
            "Initialised ambient %s generator for thread %s",
            context.algorithm.value,
            threading.current_thread().name,
        )
    return context


def ambient_state() -> GeneratorState:
    return ambient_context().state


def ambient_uniform(n: int | None = None) -> float | int:
    """Draw from this thread's generator; see :meth:`GeneratorState.uniform`."""

    return ambient_context().uniform(n)


def ambient_seed(
    *args: Any, algorithm: Algorithm | AlgorithmHandle | str | None = None
) -> GeneratorState | None:
    """Seed this thread's generator.

    Accepts three seed values (optionally with an algorithm) or a saved
    :class:`GeneratorState`.  Returns the state it replaced, or ``None`` when
    the thread had not used the ambient generator yet.
    """

    context = _current()
    if context is None:
        fresh = RandomContext()
        fresh.seed(*args, algorithm=algorithm)
        _LOCAL.context = fresh
        return None
    return context.seed(*args, algorithm=algorithm)


def ambient_reset(
    algorithm: Algorithm | AlgorithmHandle | str | None = None,
) -> GeneratorState | None:
    """Put this thread's generator back to its default state.

    Returns the state it replaced, or ``None`` when there was none.
    """

    context = _current()
    if context is None:
        _LOCAL.context = RandomContext(initial_state(algorithm))
        return None
    return context.reset(algorithm)
