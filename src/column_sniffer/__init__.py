"""Column Sniffer: infer column separators in plain-text tables.

Given command output such as process listings or disk usage tables, the
package estimates which delimiter pattern (tabs, four spaces, two or more
spaces, any whitespace) splits the text into the most uniform table, using
row-length variance and Chauvenet's criterion to tolerate a few malformed rows.
"""

__all__ = [
    "__version__",
    "probabilistic_split",
    "select_column_separator",
    "SplitConfig",
    "SelectionResult",
    "SelectionError",
]

__version__ = "0.1.0"

from .config import SplitConfig  # noqa: E402
from .inference import SelectionError, SelectionResult, select_column_separator  # noqa: E402
from .split import probabilistic_split  # noqa: E402
