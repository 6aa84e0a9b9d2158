"""Exceptions raised at the public call boundary."""

from __future__ import annotations

__all__ = ["InvalidBound", "PRNGError", "UnknownAlgorithm"]


class PRNGError(Exception):
    """Base class for errors raised by :mod:`pyprng`."""


class UnknownAlgorithm(PRNGError, KeyError):
    """The algorithm identifier is not one of the supported generators."""

    def __init__(self, identifier: object) -> None:
        super().__init__(f"Unknown algorithm {identifier!r}")
        self.identifier = identifier

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidBound(PRNGError, ValueError):
    """The upper bound of an integer draw is not a positive integer."""

    def __init__(self, bound: object) -> None:
        super().__init__(f"Upper bound must be a positive integer, got {bound!r}")
        self.bound = bound
