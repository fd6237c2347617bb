"""Index of the extreme element in a list of scores."""

from __future__ import annotations

from typing import Sequence

from .enums import Direction


def extremum_index(direction: Direction, scores: Sequence[float]) -> int:
    """Return the index of the largest or smallest score.

    Scans left to right and only moves on a strictly better score, so ties
    resolve to the earliest index. An empty list yields 0; callers are
    expected to check the index against their own list.

    Examples:
        >>> extremum_index(Direction.MAXIMIZE, [1.0, 4.0, 4.0])
        1
        >>> extremum_index(Direction.MINIMIZE, [2.0, 0.5, 3.0])
        1
    """
    if len(scores) == 0:
        return 0
    best_index = 0
    best = scores[0]
    for i, score in enumerate(scores):
        if direction.prefers(score, best):
            best = score
            best_index = i
    return best_index


__all__ = ["extremum_index"]
