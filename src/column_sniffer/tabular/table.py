"""Split raw text into a table once the separators are known.

A table is a list of rows, each row a list of cell strings. Rows are not
required to have the same length; the separator selector uses exactly that
variation to judge candidate column separators.
"""

from __future__ import annotations

from typing import List, Pattern

import pandas as pd

Table = List[List[str]]


def split_rows(row_sep: Pattern[str], text: str) -> List[str]:
    """Split *text* into rows, dropping rows that are blank.

    Surrounding spaces and carriage returns are stripped from each row so
    that right-aligned command output does not start with an empty cell.
    Tabs are kept since a leading tab marks an empty first column.
    """
    rows = []
    for row in row_sep.split(text):
        stripped = row.strip(" \r")
        if stripped:
            rows.append(stripped)
    return rows


def separate_string(row_sep: Pattern[str], col_sep: Pattern[str], text: str) -> Table:
    """Split *text* into rows with *row_sep* and each row into cells with *col_sep*.

    Examples:
        >>> import re
        >>> separate_string(re.compile(r"\\n+"), re.compile(r"\\t+"), "a\\tb\\nc\\td\\n")
        [['a', 'b'], ['c', 'd']]
    """
    return [col_sep.split(row) for row in split_rows(row_sep, text)]


def row_lengths(table: Table) -> List[int]:
    """Number of cells in each row."""
    return [len(row) for row in table]


def get_column(table: Table, index: int) -> List[str]:
    """Cells at column *index*, skipping rows that are too short."""
    return [row[index] for row in table if len(row) > index]


def get_column_by_header(table: Table, header: str) -> List[str]:
    """Cells of the column whose first-row cell equals *header*.

    The header cell itself is excluded. Returns an empty list when the table
    is empty or no column carries that header.
    """
    if not table:
        return []
    try:
        index = table[0].index(header)
    except ValueError:
        return []
    return get_column(table[1:], index)


def _column_names(header_row: List[str], width: int) -> List[str]:
    """Unique column names for a header row padded to *width*.

    Empty or missing names become ``column_<i>``; a name seen before gets the
    suffix ``_<i>``, where i is the column index.

    Examples:
        >>> _column_names(["name", "name", ""], 4)
        ['name', 'name_1', 'column_2', 'column_3']
    """
    names: List[str] = []
    seen = set()
    for i in range(width):
        name = header_row[i] if i < len(header_row) and header_row[i] else f"column_{i}"
        while name in seen:
            name = f"{name}_{i}"
        seen.add(name)
        names.append(name)
    return names


def to_dataframe(table: Table, header: bool = False) -> pd.DataFrame:
    """Convert a (possibly ragged) table into a DataFrame.

    Short rows are padded with missing values. With ``header=True`` the first
    row provides column names (see ``_column_names``), so the resulting
    columns are always unique.
    """
    if not table:
        return pd.DataFrame()
    width = max(len(row) for row in table)
    if not header:
        return pd.DataFrame(table, columns=range(width))
    return pd.DataFrame(table[1:], columns=_column_names(table[0], width))
