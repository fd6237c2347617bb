"""Tests for the detect and split CLI commands."""

from __future__ import annotations

import argparse
import io
import json

import pytest

from column_sniffer.interfaces.cli.main import build_parser, cmd_detect, cmd_split, main


def make_args(**overrides) -> argparse.Namespace:
    """Namespace with the defaults the parser would give a subcommand."""
    values = {
        "input": None,
        "row_separator": None,
        "config": None,
        "format": "tsv",
        "header": False,
        "column": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture
def tab_file(tmp_path, tab_text):
    """3x3 tab-separated table written to a file."""
    path = tmp_path / "table.txt"
    path.write_text(tab_text, encoding="utf-8")
    return path


@pytest.fixture
def sizes_file(tmp_path):
    """Tab-separated table with a name/size header row."""
    path = tmp_path / "sizes.txt"
    path.write_text("name\tsize\nroot\t100G\nhome\t900G\n", encoding="utf-8")
    return path


class TestCmdDetect:
    """Tests for `cmd_detect` output and exit codes."""

    def test_detect_tab_file(self, tab_file, capsys):
        """Test that a tab table reports the tab pattern on pass 0."""
        assert cmd_detect(make_args(input=str(tab_file))) == 0
        out = capsys.readouterr().out
        assert "pattern: \\t+" in out
        assert "pass: 0" in out
        assert "variance: 0.0000" in out

    def test_detect_fallback(self, tmp_path, ragged_text, capsys):
        """Test that a ragged table reports the fallback."""
        path = tmp_path / "ragged.txt"
        path.write_text(ragged_text, encoding="utf-8")
        assert cmd_detect(make_args(input=str(path))) == 0
        assert "pass: fallback" in capsys.readouterr().out

    def test_detect_stdin(self, monkeypatch, capsys):
        """Test that text is read from stdin when no input file is given."""
        monkeypatch.setattr("sys.stdin", io.StringIO("a  b\nc  d\n"))
        assert cmd_detect(make_args()) == 0
        assert "pattern: \\s{2,}" in capsys.readouterr().out

    def test_missing_input(self, tmp_path):
        """Test that a missing input file exits with 2."""
        assert cmd_detect(make_args(input=str(tmp_path / "missing.txt"))) == 2

    def test_invalid_row_separator(self, tab_file):
        """Test that an invalid row separator regex exits with 2."""
        assert cmd_detect(make_args(input=str(tab_file), row_separator="(")) == 2

    def test_invalid_config(self, tab_file, tmp_path):
        """Test that an out-of-range config value exits with 2."""
        config = tmp_path / "bad.yaml"
        config.write_text("outlier_passes: 0\n", encoding="utf-8")
        assert cmd_detect(make_args(input=str(tab_file), config=str(config))) == 2

    @pytest.mark.parametrize(
        "content",
        ["outlier_passes:\n", "match_ratio: [0.5]\n", "row_separator: 5\n"],
        ids=["null_value", "list_value", "number_row_separator"],
    )
    def test_config_value_of_wrong_type(self, tab_file, tmp_path, content):
        """Test that a config value of the wrong type exits with 2."""
        config = tmp_path / "typed.yaml"
        config.write_text(content, encoding="utf-8")
        assert cmd_detect(make_args(input=str(tab_file), config=str(config))) == 2

    def test_empty_candidate_list_is_internal_error(self, tab_file, tmp_path):
        """Test that an empty candidate list exits with 1."""
        config = tmp_path / "empty.yaml"
        config.write_text("column_separators: []\n", encoding="utf-8")
        assert cmd_detect(make_args(input=str(tab_file), config=str(config))) == 1


class TestCmdSplit:
    """Tests for `cmd_split` output formats."""

    def test_split_tsv(self, tab_file, capsys):
        """Test the default TSV output."""
        assert cmd_split(make_args(input=str(tab_file))) == 0
        assert capsys.readouterr().out == "a\tb\tc\nd\te\tf\ng\th\ti\n"

    def test_split_csv(self, tab_file, capsys):
        """Test CSV output."""
        assert cmd_split(make_args(input=str(tab_file), format="csv")) == 0
        assert capsys.readouterr().out == "a,b,c\nd,e,f\ng,h,i\n"

    def test_split_json(self, tab_file, capsys):
        """Test JSON output as a list of rows."""
        assert cmd_split(make_args(input=str(tab_file), format="json")) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows == [["a", "b", "c"], ["d", "e", "f"], ["g", "h", "i"]]

    def test_split_json_with_header(self, sizes_file, capsys):
        """Test JSON output as records keyed by the header row."""
        assert cmd_split(make_args(input=str(sizes_file), format="json", header=True)) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows == [{"name": "root", "size": "100G"}, {"name": "home", "size": "900G"}]

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("name\tname\nroot\t100G\n", [{"name": "root", "name_1": "100G"}]),
            ("\tsize\nroot\t100G\n", [{"column_0": "root", "size": "100G"}]),
        ],
        ids=["repeated_header", "empty_header_cell"],
    )
    def test_split_json_with_awkward_header(self, tmp_path, capsys, text, expected):
        """Test that repeated or empty header cells still give JSON records."""
        path = tmp_path / "awkward.txt"
        path.write_text(text, encoding="utf-8")
        assert cmd_split(make_args(input=str(path), format="json", header=True)) == 0
        assert json.loads(capsys.readouterr().out) == expected

    def test_split_custom_row_separator(self, tmp_path, capsys):
        """Test that --row-separator changes how rows are found."""
        path = tmp_path / "inline.txt"
        path.write_text("a\tb;c\td", encoding="utf-8")
        assert cmd_split(make_args(input=str(path), row_separator=";", format="csv")) == 0
        assert capsys.readouterr().out == "a,b\nc,d\n"


class TestCmdSplitColumn:
    """Tests for printing a single column with --column."""

    def test_column_by_header(self, sizes_file, capsys):
        """Test selecting a column by its header cell."""
        args = make_args(input=str(sizes_file), header=True, column="size")
        assert cmd_split(args) == 0
        assert capsys.readouterr().out == "100G\n900G\n"

    def test_column_by_index(self, tab_file, capsys):
        """Test selecting a column by zero-based index."""
        assert cmd_split(make_args(input=str(tab_file), column="1")) == 0
        assert capsys.readouterr().out == "b\ne\nh\n"

    def test_column_index_skips_header(self, sizes_file, capsys):
        """Test that an index with --header leaves out the header row."""
        args = make_args(input=str(sizes_file), header=True, column="0")
        assert cmd_split(args) == 0
        assert capsys.readouterr().out == "root\nhome\n"

    @pytest.mark.parametrize(
        "column, header",
        [("missing", True), ("size", False), ("-1", False)],
        ids=["unknown_header", "name_without_header", "negative_index"],
    )
    def test_unknown_column(self, sizes_file, capsys, column, header):
        """Test that an unknown column exits with 2 and prints nothing."""
        args = make_args(input=str(sizes_file), header=header, column=column)
        assert cmd_split(args) == 2
        assert capsys.readouterr().out == ""


def test_parser_format_is_case_insensitive():
    """Test that --format accepts upper-case values."""
    args = build_parser().parse_args(["split", "--format", "CSV"])
    assert args.format == "csv"
    assert args.func is cmd_split


def test_parser_accepts_column():
    """Test that split takes a --column option."""
    args = build_parser().parse_args(["split", "--header", "--column", "size"])
    assert args.column == "size"
    assert args.header is True


def test_parser_requires_command():
    """Test that running without a subcommand is an argparse error."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_runs_split(tab_file, capsys):
    """Test that main() dispatches to the split command."""
    assert main(["--errors-only", "split", "--input", str(tab_file), "--format", "csv"]) == 0
    assert capsys.readouterr().out == "a,b,c\nd,e,f\ng,h,i\n"
