"""Outlier rejection using Chauvenet's criterion.

See https://en.wikipedia.org/wiki/Chauvenet%27s_criterion. A point is rejected
when, under a normal distribution fitted to the sample, its density is below
1 / (2 * N). Only the single most deviant point is considered per call; the
fit changes once it is gone, so callers re-apply the filter to drop more.
"""

from __future__ import annotations

from typing import List, Sequence

from .enums import Direction
from .extrema import extremum_index
from .stats import mean, normal_density, squared_deviations, std_dev


def is_outlier(x: float, values: Sequence[float]) -> bool:
    """Return True if *x* fails Chauvenet's criterion against *values*."""
    if len(values) < 2:
        return False
    density = normal_density(x, mean(values), std_dev(values))
    return density < 1.0 / (2 * len(values))


def chauvenet(values: Sequence[int]) -> List[int]:
    """Drop the most deviant measurement if it is an outlier.

    Always returns a new list; *values* is never modified. Samples with fewer
    than two points are returned unchanged.

    Examples:
        >>> chauvenet([3, 3, 3, 3, 1])
        [3, 3, 3, 3]
        >>> chauvenet([3, 3, 3])
        [3, 3, 3]
    """
    if len(values) < 2:
        return list(values)
    index = extremum_index(Direction.MAXIMIZE, squared_deviations(values))
    if is_outlier(values[index], values):
        return [v for i, v in enumerate(values) if i != index]
    return list(values)


__all__ = ["chauvenet", "is_outlier"]
