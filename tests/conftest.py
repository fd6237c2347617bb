"""Shared pytest fixtures with sample command-output tables."""

import pytest


@pytest.fixture
def tab_text() -> str:
    """Three rows of three tab-separated cells, with a trailing newline."""
    return "a\tb\tc\nd\te\tf\ng\th\ti\n"


@pytest.fixture
def four_space_text() -> str:
    """Columns aligned with exactly four spaces."""
    return (
        "name    size    used\n"
        "root    100G    42G\n"
        "home    900G    512G\n"
        "boot    1G    200M\n"
    )


@pytest.fixture
def two_space_text() -> str:
    """ps-like output: columns separated by two spaces, cells contain single spaces."""
    return "PID  TTY  CMD\n1  ?  /sbin/init splash\n42  pts/0  bash --login\n"


@pytest.fixture
def whitespace_text() -> str:
    """Cells separated by single spaces only."""
    return "a b c\nd e f\ng h i\n"


@pytest.fixture
def malformed_row_text() -> str:
    """Six tab-separated rows of three cells and one row missing a column."""
    rows = ["x\ty\tz"] * 6 + ["x\ty"]
    return "\n".join(rows) + "\n"


@pytest.fixture
def ragged_text() -> str:
    """Rows whose cell counts never settle on a consistent width."""
    return "a\tb\nc\td\te\tf\ng\nh\ti\tj\tk\tl\tm\tn\to\n"
