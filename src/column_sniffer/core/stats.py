"""Descriptive statistics over row-length measurements.

The helpers build on each other:
mean -> squared_deviations -> variance -> std_dev -> normal_density

All functions accept any sequence of numbers (typically per-row cell counts)
and return plain Python floats. Empty and single-element inputs are defined
rather than producing NaN: their variance and standard deviation are 0.
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of *values*.

    Raises:
        ValueError: If *values* is empty.
    """
    if len(values) == 0:
        raise ValueError("mean() requires at least one value")
    return float(np.mean(np.asarray(values, dtype=float)))


def squared_deviations(values: Sequence[float]) -> List[float]:
    """Squared difference between each value and the mean, in input order.

    Examples:
        >>> squared_deviations([1, 2, 3])
        [1.0, 0.0, 1.0]
    """
    if len(values) == 0:
        return []
    arr = np.asarray(values, dtype=float)
    return ((arr.mean() - arr) ** 2).tolist()


def variance(values: Sequence[float]) -> float:
    """Population variance: the mean of the squared deviations.

    Fewer than two values have a variance of 0.
    """
    if len(values) < 2:
        return 0.0
    return mean(squared_deviations(values))


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation (0 when every value is identical)."""
    return math.sqrt(variance(values))


def normal_density(x: float, mu: float, sigma: float) -> float:
    """Gaussian probability density of *x* under N(mu, sigma**2).

    A zero *sigma* means every observation sits on the mean, so the density
    is 1 at the mean and 0 everywhere else.
    """
    if sigma == 0:
        return 1.0 if x == mu else 0.0
    coefficient = 1.0 / (sigma * math.sqrt(2 * math.pi))
    exponent = -((x - mu) ** 2) / (2 * sigma**2)
    return coefficient * math.exp(exponent)


__all__ = [
    "mean",
    "squared_deviations",
    "variance",
    "std_dev",
    "normal_density",
]
