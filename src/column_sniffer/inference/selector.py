"""Pick the column separator that splits a text into the most uniform table.

Selection runs in three stages:

1. Pre-filter: drop candidates that match fewer than half of the rows. A
   pattern that never matches leaves every row as a single cell, which looks
   perfectly uniform but is not a split at all.
2. Multi-pass search: on pass N every surviving candidate, in priority order,
   may discard up to N outlier rows; the first consistent candidate wins.
3. Fallback: with no consistent candidate, take the one with the lowest
   variance after discarding the maximum number of outliers.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Pattern, Sequence, Union

from column_sniffer.config import DEFAULT_CONFIG, SplitConfig, compile_pattern
from column_sniffer.core.enums import Direction
from column_sniffer.core.extrema import extremum_index
from column_sniffer.tabular.table import split_rows
from .evaluator import consistent_variance, measure_variance
from .models import SelectionError, SelectionResult
from .observer import LoggingObserver, SplitObserver, notify

logger = logging.getLogger(__name__)


def matches_most(pattern: Pattern[str], rows: Sequence[str], ratio: float = 0.5) -> bool:
    """Return True if *pattern* occurs in at least *ratio* of *rows* (floored)."""
    count = sum(1 for row in rows if pattern.search(row))
    return count >= int(len(rows) * ratio)


def prefilter_candidates(
    candidates: Sequence[Pattern[str]],
    rows: Sequence[str],
    ratio: float = 0.5,
) -> List[Pattern[str]]:
    """Candidates that match most rows, keeping their priority order."""
    return [c for c in candidates if matches_most(c, rows, ratio)]


def select_column_separator(
    text: str,
    row_separator: Union[str, Pattern[str], None] = None,
    *,
    config: Optional[SplitConfig] = None,
    observer: Optional[SplitObserver] = None,
) -> SelectionResult:
    """Choose the column separator that gives the most consistent row lengths.

    Args:
        text: Raw text to analyse.
        row_separator: Pattern splitting *text* into rows. Defaults to the
            configured row separator.
        config: Thresholds and candidate list. Defaults to DEFAULT_CONFIG.
        observer: Receives diagnostics. Defaults to a LoggingObserver.

    Returns:
        SelectionResult describing the winning pattern. A pattern is always
        returned; no separator is ever rejected outright.

    Raises:
        SelectionError: If the candidate list is empty, so no index can be
            resolved to a pattern.

    Examples:
        >>> select_column_separator("a\\tb\\nc\\td\\n").pattern.pattern
        '\\\\t+'
    """
    config = config or DEFAULT_CONFIG
    observer = observer if observer is not None else LoggingObserver()
    row_sep = compile_pattern(row_separator) if row_separator is not None else config.row_separator
    initial = list(config.column_separators)

    prefilter_fallback = False
    candidates = prefilter_candidates(initial, split_rows(row_sep, text), config.match_ratio)
    if not candidates:
        notify(observer, "no_matching_separator", initial, text)
        candidates = initial
        prefilter_fallback = True

    for outliers in range(config.outlier_passes):
        for candidate in candidates:
            found = consistent_variance(
                text, row_sep, candidate, outliers, config.consistency_threshold
            )
            if found is not None:
                return SelectionResult(
                    pattern=candidate,
                    accepted_pass=outliers,
                    variance=found,
                    prefilter_fallback=prefilter_fallback,
                    candidates=candidates,
                )

    notify(observer, "no_consistent_separator", initial, config.outlier_passes)
    variances = [
        measure_variance(text, row_sep, candidate, config.outlier_passes)
        for candidate in candidates
    ]
    index = extremum_index(Direction.MINIMIZE, variances)
    if index >= len(candidates):
        logger.error(
            "Lowest-variance index %d not found in column separators %s",
            index,
            [c.pattern for c in candidates],
        )
        raise SelectionError(index, [c.pattern for c in candidates])
    return SelectionResult(
        pattern=candidates[index],
        accepted_pass=None,
        variance=variances[index],
        prefilter_fallback=prefilter_fallback,
        candidates=candidates,
    )


__all__ = ["matches_most", "prefilter_candidates", "select_column_separator"]
