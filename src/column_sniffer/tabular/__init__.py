"""Row/column splitting primitive and helpers for working with split tables."""

from __future__ import annotations

from .table import (
    Table,
    get_column,
    get_column_by_header,
    row_lengths,
    separate_string,
    split_rows,
    to_dataframe,
)

__all__ = [
    "Table",
    "get_column",
    "get_column_by_header",
    "row_lengths",
    "separate_string",
    "split_rows",
    "to_dataframe",
]
