"""Split semi-structured text into a table without knowing its delimiters."""

from __future__ import annotations

from typing import Optional, Pattern, Union

from column_sniffer.config import DEFAULT_CONFIG, SplitConfig, compile_pattern
from column_sniffer.inference.observer import LoggingObserver, SplitObserver, notify
from column_sniffer.inference.selector import select_column_separator
from column_sniffer.tabular.table import Table, separate_string


def probabilistic_split(
    text: str,
    row_separator: Union[str, Pattern[str], None] = None,
    *,
    config: Optional[SplitConfig] = None,
    observer: Optional[SplitObserver] = None,
) -> Table:
    """Split *text* with the column separator that gives the most consistent rows.

    Outlier rows only influence which separator is chosen; every row of the
    text is present in the returned table.

    Examples:
        >>> probabilistic_split("a\\tb\\tc\\nd\\te\\tf\\n")
        [['a', 'b', 'c'], ['d', 'e', 'f']]
    """
    config = config or DEFAULT_CONFIG
    observer = observer if observer is not None else LoggingObserver()
    row_sep = compile_pattern(row_separator) if row_separator is not None else config.row_separator
    result = select_column_separator(text, row_sep, config=config, observer=observer)
    notify(observer, "separator_chosen", result.pattern)
    return separate_string(row_sep, result.pattern, text)


__all__ = ["probabilistic_split"]
