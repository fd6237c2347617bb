"""Observability hooks for the separator selector.

The selector reports what it is doing through an observer passed in by the
caller instead of logging directly, so the algorithm can be exercised in
tests without capturing log output.

To plug in a custom observer, implement the three methods of the
SplitObserver protocol; no base class is needed.
"""

from __future__ import annotations

import logging
from typing import List, Pattern, Protocol, Sequence

logger = logging.getLogger(__name__)


class SplitObserver(Protocol):
    """Protocol for receiving selector diagnostics.

    Methods:
        no_matching_separator: No candidate matched enough rows.
        no_consistent_separator: No candidate reached the consistency threshold.
        separator_chosen: A column separator was picked for the final split.
    """

    def no_matching_separator(self, attempted: Sequence[Pattern[str]], text: str) -> None:
        """Called before falling back to the unfiltered candidate list."""
        ...

    def no_consistent_separator(self, attempted: Sequence[Pattern[str]], outliers: int) -> None:
        """Called before falling back to the lowest-variance candidate."""
        ...

    def separator_chosen(self, pattern: Pattern[str]) -> None:
        """Called once the winning separator is known."""
        ...


def _patterns(attempted: Sequence[Pattern[str]]) -> List[str]:
    return [p.pattern for p in attempted]


class LoggingObserver:
    """Forward selector diagnostics to the standard logging module."""

    def __init__(self, log: logging.Logger = logger) -> None:
        self.log = log

    def no_matching_separator(self, attempted: Sequence[Pattern[str]], text: str) -> None:
        self.log.warning(
            "Couldn't find a column separator matching most rows; trying all of %s",
            _patterns(attempted),
            extra={"attempted": _patterns(attempted), "table": text},
        )

    def no_consistent_separator(self, attempted: Sequence[Pattern[str]], outliers: int) -> None:
        self.log.debug(
            "No consistent column separator after discarding %d outliers; "
            "picking the lowest variance",
            outliers,
            extra={"attempted": _patterns(attempted), "outliers": outliers},
        )

    def separator_chosen(self, pattern: Pattern[str]) -> None:
        self.log.debug(
            "Chose column separator %r", pattern.pattern, extra={"regexp": pattern.pattern}
        )


class NullObserver:
    """Discard all selector diagnostics."""

    def no_matching_separator(self, attempted: Sequence[Pattern[str]], text: str) -> None:
        pass

    def no_consistent_separator(self, attempted: Sequence[Pattern[str]], outliers: int) -> None:
        pass

    def separator_chosen(self, pattern: Pattern[str]) -> None:
        pass


def notify(observer: SplitObserver, event: str, *args) -> None:
    """Call hook *event* on *observer*; a failing observer never breaks selection."""
    try:
        getattr(observer, event)(*args)
    except Exception:  # pylint: disable=broad-exception-caught
        logger.debug("Observer hook %s failed", event, exc_info=True)


__all__ = ["SplitObserver", "LoggingObserver", "NullObserver", "notify"]
