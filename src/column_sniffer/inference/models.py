"""Separator inference data models.

This module defines the data structures produced by the selector:
- SelectionResult: the chosen column separator and how it was chosen
- SelectionError: raised when the selector's internal invariant is broken
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Pattern


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of a column separator selection.

    Attributes:
        pattern: The winning column separator.
        accepted_pass: Search pass on which the pattern proved consistent
            (the number of outlier rows it was allowed to discard), or None
            when no candidate was consistent and the lowest-variance candidate
            was taken instead.
        variance: Row-length variance of the winning pattern, measured after
            discarding the outliers its pass allowed.
        prefilter_fallback: True if no candidate matched enough rows and the
            full candidate list was searched instead.
        candidates: The candidates that were searched, in priority order.

    Examples:
        >>> import re
        >>> result = SelectionResult(pattern=re.compile(r"\\t+"), accepted_pass=0, variance=0.0)
        >>> result.used_fallback
        False
    """

    pattern: Pattern[str]
    accepted_pass: Optional[int]
    variance: float
    prefilter_fallback: bool = False
    candidates: List[Pattern[str]] = field(default_factory=list)

    @property
    def used_fallback(self) -> bool:
        """True if the pattern was picked by lowest variance rather than consistency."""
        return self.accepted_pass is None


class SelectionError(RuntimeError):
    """The selector could not resolve a candidate index to a pattern.

    This indicates a programming error (for example an empty candidate list)
    rather than unusual input. The attempted candidates and the offending
    index are kept on the exception for diagnosis.
    """

    def __init__(self, index: int, candidates: List[str]) -> None:
        self.index = index
        self.candidates = list(candidates)
        super().__init__(
            f"Internal error: lowest-variance index {index} not found in "
            f"{len(self.candidates)} column separator candidates {self.candidates}"
        )


__all__ = ["SelectionResult", "SelectionError"]
