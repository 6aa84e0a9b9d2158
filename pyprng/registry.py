"""Binding of algorithm identifiers to generator engines."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType, ModuleType
from typing import Any, Callable, Sequence

from prngcommon import (
    as183,
    sfmt19937,
    tinymt32,
    xorshift64star,
    xorshift128plus,
    xorshift1024star,
)

from .errors import UnknownAlgorithm

__all__ = [
    "DEFAULT_ALGORITHM",
    "Algorithm",
    "AlgorithmHandle",
    "available_algorithms",
    "resolve",
]


class Algorithm(str, enum.Enum):
    AS183 = "as183"
    XORSHIFT64STAR = "xorshift64star"
    XORSHIFT128PLUS = "xorshift128plus"
    XORSHIFT1024STAR = "xorshift1024star"
    SFMT19937 = "sfmt19937"
    TINYMT32 = "tinymt32"


DEFAULT_ALGORITHM = Algorithm.AS183

_ALIASES = {
    "exs64": Algorithm.XORSHIFT64STAR,
    "exsplus": Algorithm.XORSHIFT128PLUS,
    "exs1024": Algorithm.XORSHIFT1024STAR,
    "sfmt": Algorithm.SFMT19937,
    "tinymt": Algorithm.TINYMT32,
}


@dataclass(frozen=True, slots=True)
class AlgorithmHandle:
    """The four operations of one algorithm.

    Handles are created once per algorithm at import time and shared by every
    :class:`~pyprng.state.GeneratorState` of that algorithm.
    """

    algorithm: Algorithm
    state_type: type
    initial_state: Callable[[], Any]
    seed: Callable[[Sequence[int]], Any]
    uniform_float: Callable[[Any], tuple[float, Any]]
    uniform_int: Callable[[int, Any], tuple[int, Any]]

    def __repr__(self) -> str:
        return f"AlgorithmHandle({self.algorithm.value!r})"


def _handle(algorithm: Algorithm, engine: ModuleType, state_type: type) -> AlgorithmHandle:
    return AlgorithmHandle(
        algorithm=algorithm,
        state_type=state_type,
        initial_state=engine.initial_state,
        seed=engine.seed,
        uniform_float=engine.uniform_float,
        uniform_int=engine.uniform_int,
    )


_HANDLES = MappingProxyType(
    {
        Algorithm.AS183: _handle(Algorithm.AS183, as183, as183.AS183State),
        Algorithm.XORSHIFT64STAR: _handle(
            Algorithm.XORSHIFT64STAR, xorshift64star, xorshift64star.Xorshift64StarState
        ),
        Algorithm.XORSHIFT128PLUS: _handle(
            Algorithm.XORSHIFT128PLUS, xorshift128plus, xorshift128plus.Xorshift128PlusState
        ),
        Algorithm.XORSHIFT1024STAR: _handle(
            Algorithm.XORSHIFT1024STAR, xorshift1024star, xorshift1024star.Xorshift1024StarState
        ),
        Algorithm.SFMT19937: _handle(Algorithm.SFMT19937, sfmt19937, sfmt19937.SFMTState),
        Algorithm.TINYMT32: _handle(Algorithm.TINYMT32, tinymt32, tinymt32.TinyMTState),
    }
)


def available_algorithms() -> tuple[Algorithm, ...]:
    return tuple(_HANDLES)


def resolve(identifier: Algorithm | AlgorithmHandle | str) -> AlgorithmHandle:
    """Return the handle for *identifier*.

    Parameters
    ----------
    identifier:
        An :class:`Algorithm` member, its string value, one of the short
        aliases (``"exs64"``, ``"exsplus"``, ``"exs1024"``, ``"sfmt"``,
        ``"tinymt"``) or a handle, which is returned unchanged.
    """

    if isinstance(identifier, AlgorithmHandle):
        return identifier
    if isinstance(identifier, Algorithm):
        return _HANDLES[identifier]
    if isinstance(identifier, str):
        name = identifier.strip().lower()
        algorithm = _ALIASES.get(name)
        if algorithm is None:
            try:
                algorithm = Algorithm(name)
            except ValueError:
                raise UnknownAlgorithm(identifier) from None
        return _HANDLES[algorithm]
    raise UnknownAlgorithm(identifier)
