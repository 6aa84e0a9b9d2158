"""Interchangeable pseudo-random number generators with explicit state."""

from .context import (
    RandomContext,
    ambient_context,
    ambient_reset,
    ambient_seed,
    ambient_state,
    ambient_uniform,
)
from .errors import InvalidBound, PRNGError, UnknownAlgorithm
from .registry import (
    DEFAULT_ALGORITHM,
    Algorithm,
    AlgorithmHandle,
    available_algorithms,
    resolve,
)
from .state import GeneratorState, initial_state, seed, uniform, uniform_array

__all__ = [
    "DEFAULT_ALGORITHM",
    "Algorithm",
    "AlgorithmHandle",
    "GeneratorState",
    "InvalidBound",
    "PRNGError",
    "RandomContext",
    "UnknownAlgorithm",
    "ambient_context",
    "ambient_reset",
    "ambient_seed",
    "ambient_state",
    "ambient_uniform",
    "available_algorithms",
    "initial_state",
    "resolve",
    "seed",
    "uniform",
    "uniform_array",
]
