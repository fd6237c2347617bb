"""Column separator inference.

This package chooses the column separator for a blob of semi-structured text:

- **Evaluator**: row-length variance of one candidate, with outlier rejection
- **Selector**: select_column_separator() - pre-filter, multi-pass search, fallback
- **Observer**: SplitObserver protocol and the logging/null implementations
- **Models**: SelectionResult, SelectionError

Usage:
    >>> from column_sniffer.inference import select_column_separator
    >>> result = select_column_separator("PID\\tCMD\\n1\\tinit\\n")
    >>> result.accepted_pass
    0
"""

from __future__ import annotations

from .models import SelectionError, SelectionResult
from .observer import LoggingObserver, NullObserver, SplitObserver
from .selector import select_column_separator

__all__ = [
    # Data models
    "SelectionResult",
    "SelectionError",
    # Observers
    "SplitObserver",
    "LoggingObserver",
    "NullObserver",
    # Selector
    "select_column_separator",
]
