"""Measure how consistently one column separator splits a text.

For a candidate separator the text is split into rows and cells and the
per-row cell counts form the measurement set. Chauvenet's criterion may
discard a bounded number of outlier rows before the variance is judged.
"""

from __future__ import annotations

from typing import List, Optional, Pattern

from column_sniffer.config import CONSISTENCY_THRESHOLD
from column_sniffer.core.chauvenet import chauvenet
from column_sniffer.core.stats import variance
from column_sniffer.tabular.table import row_lengths, separate_string


def measure_row_lengths(text: str, row_sep: Pattern[str], col_sep: Pattern[str]) -> List[int]:
    """Cell count of every row when *text* is split with *col_sep*."""
    return row_lengths(separate_string(row_sep, col_sep, text))


def discard_outliers(lengths: List[int], outliers: int) -> List[int]:
    """Apply Chauvenet's criterion *outliers* times, re-fitting after each call."""
    for _ in range(outliers):
        lengths = chauvenet(lengths)
    return lengths


def measure_variance(
    text: str,
    row_sep: Pattern[str],
    col_sep: Pattern[str],
    outliers: int,
) -> float:
    """Row-length variance of the split after discarding up to *outliers* rows."""
    lengths = measure_row_lengths(text, row_sep, col_sep)
    return variance(discard_outliers(lengths, outliers))


def consistent_variance(
    text: str,
    row_sep: Pattern[str],
    col_sep: Pattern[str],
    outliers: int,
    threshold: float = CONSISTENCY_THRESHOLD,
) -> Optional[float]:
    """First variance at or below *threshold* while discarding 0..outliers rows.

    Returns None when no amount of tolerated outlier rejection brings the
    variance down to *threshold*.
    """
    lengths = measure_row_lengths(text, row_sep, col_sep)
    for i in range(outliers + 1):
        current = variance(lengths)
        if current <= threshold:
            return current
        if i < outliers:
            lengths = chauvenet(lengths)
    return None


def is_consistent(
    text: str,
    row_sep: Pattern[str],
    col_sep: Pattern[str],
    outliers: int,
    threshold: float = CONSISTENCY_THRESHOLD,
) -> bool:
    """Return True if *col_sep* yields near-uniform rows.

    The split counts as consistent when, for some i in 0..outliers, the
    variance after i rounds of outlier rejection is at most *threshold*.
    """
    return consistent_variance(text, row_sep, col_sep, outliers, threshold) is not None


__all__ = [
    "measure_row_lengths",
    "discard_outliers",
    "measure_variance",
    "consistent_variance",
    "is_consistent",
]
