"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Which end of a list of scores the extremum finder looks for.

    Values are strings to ease logging and CLI interchange.
    """

    MAXIMIZE = "MAXIMIZE"
    MINIMIZE = "MINIMIZE"

    def prefers(self, candidate: float, current: float) -> bool:
        """Return True if *candidate* is strictly better than *current*."""
        if self is Direction.MAXIMIZE:
            return candidate > current
        return candidate < current


__all__ = ["Direction"]
