"""Column separator inference configuration.

This module centralizes the thresholds and the candidate separator list used
by the selector. The defaults are tuned for command-line tool output;
adjust them through a YAML file passed to `load_config()` rather
than editing the constants.

YAML keys (all optional):
    - consistency_threshold: highest row-length variance accepted as "consistent"
    - outlier_passes: number of search passes (pass N tolerates N outlier rows)
    - match_ratio: share of rows a candidate must match to be considered
    - column_separators: ordered list of regexes, most specific first
    - row_separator: regex used to split text into rows
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Pattern, Tuple, Union

import yaml

# ============================================================================
# DEFAULT CONSTANTS
# ============================================================================

# Variance of 0 means identical cell counts; 0.1 only absorbs float noise
CONSISTENCY_THRESHOLD = 0.1

# Passes 0..2 tolerate up to 2 outliers; the fallback measures with 3 removed
OUTLIER_PASSES = 3

# A candidate must match at least this share of rows (floored)
MATCH_RATIO = 0.5

DEFAULT_ROW_SEPARATOR = r"\n+"

# Priority order is the tie-break: earlier entries win over later ones
BUILTIN_COLUMN_SEPARATORS: Tuple[str, ...] = (
    r"\t+",     # tabs
    r"\s{4}",   # exactly four whitespace characters
    r"\s{2,}",  # two or more whitespace characters (spaces inside cells)
    r"\s+",     # any whitespace
)

_CONFIG_KEYS = {
    "consistency_threshold",
    "outlier_passes",
    "match_ratio",
    "column_separators",
    "row_separator",
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def compile_pattern(pattern: Union[str, Pattern[str]]) -> Pattern[str]:
    """Compile *pattern* unless it already is a compiled regex.

    Raises:
        ValueError: If the pattern is not a valid regular expression or
            matches the empty string.
    """
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        try:
            compiled = re.compile(str(pattern))
        except re.error as e:
            raise ValueError(f"Invalid separator regex {pattern!r}: {e}") from e
    if compiled.fullmatch(""):
        raise ValueError(f"Separator regex {compiled.pattern!r} must not match the empty string")
    return compiled


def _compile_all(patterns: Iterable[Union[str, Pattern[str]]]) -> Tuple[Pattern[str], ...]:
    return tuple(compile_pattern(p) for p in patterns)


@dataclass(frozen=True)
class SplitConfig:
    """Tunable parameters of the separator selector.

    Attributes:
        consistency_threshold: Highest variance accepted as a consistent split.
        outlier_passes: Number of search passes; also the outlier count used
            when falling back to the lowest-variance candidate.
        match_ratio: Share of rows a candidate must match to survive pre-filtering.
        column_separators: Candidate patterns in priority order.
        row_separator: Pattern used to split text into rows.

    Examples:
        >>> SplitConfig().outlier_passes
        3
        >>> len(SplitConfig().column_separators)
        4
    """

    consistency_threshold: float = CONSISTENCY_THRESHOLD
    outlier_passes: int = OUTLIER_PASSES
    match_ratio: float = MATCH_RATIO
    column_separators: Tuple[Pattern[str], ...] = field(
        default_factory=lambda: _compile_all(BUILTIN_COLUMN_SEPARATORS)
    )
    row_separator: Pattern[str] = field(
        default_factory=lambda: compile_pattern(DEFAULT_ROW_SEPARATOR)
    )

    def __post_init__(self) -> None:
        """Validate field constraints and compile string patterns."""
        if self.consistency_threshold < 0:
            raise ValueError(
                f"consistency_threshold must be >= 0, got {self.consistency_threshold}"
            )
        if self.outlier_passes < 1:
            raise ValueError(f"outlier_passes must be >= 1, got {self.outlier_passes}")
        if not 0 <= self.match_ratio <= 1:
            raise ValueError(f"match_ratio must be between 0 and 1, got {self.match_ratio}")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "column_separators", _compile_all(self.column_separators))
        object.__setattr__(self, "row_separator", compile_pattern(self.row_separator))


DEFAULT_CONFIG = SplitConfig()


def _coerce(data: Dict[str, Any], key: str, kind: type) -> Any:
    """Convert data[key] to *kind*, reporting bad values as ValueError."""
    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key} must be a number, got {value!r}") from e


def config_from_dict(data: Dict[str, Any]) -> SplitConfig:
    """Build a SplitConfig from a mapping, keeping defaults for missing keys.

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    unknown = set(data) - _CONFIG_KEYS
    if unknown:
        raise ValueError(
            f"Unknown config keys: {sorted(unknown)}. Valid keys: {sorted(_CONFIG_KEYS)}"
        )
    kwargs: Dict[str, Any] = {}
    if "consistency_threshold" in data:
        kwargs["consistency_threshold"] = _coerce(data, "consistency_threshold", float)
    if "outlier_passes" in data:
        kwargs["outlier_passes"] = _coerce(data, "outlier_passes", int)
    if "match_ratio" in data:
        kwargs["match_ratio"] = _coerce(data, "match_ratio", float)
    if "column_separators" in data:
        separators = data["column_separators"]
        if not isinstance(separators, list) or not all(isinstance(s, str) for s in separators):
            raise ValueError("column_separators must be a list of regex strings")
        kwargs["column_separators"] = tuple(separators)
    if "row_separator" in data:
        if not isinstance(data["row_separator"], str):
            raise ValueError(
                f"row_separator must be a regex string, got {data['row_separator']!r}"
            )
        kwargs["row_separator"] = data["row_separator"]
    return SplitConfig(**kwargs)


def load_config(config_file: Path) -> SplitConfig:
    """Load a SplitConfig from a YAML file.

    Raises:
        FileNotFoundError: If *config_file* does not exist.
        ValueError: If the file is not a YAML mapping or holds invalid values.
    """
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with config_file.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse config file {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_file} must contain a mapping")
    return config_from_dict(data)


__all__ = [
    "CONSISTENCY_THRESHOLD",
    "OUTLIER_PASSES",
    "MATCH_RATIO",
    "DEFAULT_ROW_SEPARATOR",
    "BUILTIN_COLUMN_SEPARATORS",
    "DEFAULT_CONFIG",
    "SplitConfig",
    "compile_pattern",
    "config_from_dict",
    "load_config",
]
