import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import colorlog

from column_sniffer import __version__
from column_sniffer.config import DEFAULT_CONFIG, SplitConfig, compile_pattern, load_config
from column_sniffer.inference import SelectionError, select_column_separator
from column_sniffer.inference.observer import LoggingObserver, notify
from column_sniffer.tabular.table import (
    Table,
    get_column,
    get_column_by_header,
    separate_string,
    to_dataframe,
)

OUTPUT_FORMATS = ["tsv", "csv", "json"]


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _load_inputs(args: argparse.Namespace) -> Optional[tuple]:
    """Read the text, config and row separator named by *args*.

    Returns None (after logging the reason) when any of them is unusable.
    """
    config: SplitConfig = DEFAULT_CONFIG
    config_path = getattr(args, "config", None)
    if config_path:
        try:
            config = load_config(Path(config_path))
        except (FileNotFoundError, ValueError) as e:
            logging.error("Invalid config: %s", e)
            return None

    row_sep = config.row_separator
    if getattr(args, "row_separator", None):
        try:
            row_sep = compile_pattern(args.row_separator)
        except ValueError as e:
            logging.error("Invalid --row-separator: %s", e)
            return None

    input_path = getattr(args, "input", None)
    if input_path:
        path = Path(input_path)
        if not path.is_file():
            logging.error("Input file not found: %s", path)
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logging.error("Failed to read %s: %s", path, e)
            return None
    else:
        text = sys.stdin.read()
    return text, config, row_sep


def cmd_detect(args: argparse.Namespace) -> int:
    """Print the column separator chosen for the input text."""
    loaded = _load_inputs(args)
    if loaded is None:
        return 2
    text, config, row_sep = loaded
    try:
        result = select_column_separator(text, row_sep, config=config)
    except SelectionError as e:
        logging.error("%s", e)
        return 1
    accepted = "fallback" if result.used_fallback else str(result.accepted_pass)
    print(f"pattern: {result.pattern.pattern}")
    print(f"pass: {accepted}")
    print(f"variance: {result.variance:.4f}")
    if result.prefilter_fallback:
        print("note: no separator matched most rows; searched all candidates")
    return 0


def _select_column(table: Table, column: str, header: bool) -> Optional[List[str]]:
    """Cells of one column, chosen by header name or by zero-based index.

    With *header* the first row names the columns and is not part of the
    output. Returns None (after logging the reason) when the column is unknown.
    """
    if header and column in (table[0] if table else []):
        return get_column_by_header(table, column)
    try:
        index = int(column)
    except ValueError:
        logging.error("Column not found: %s", column)
        return None
    if index < 0:
        logging.error("Column index must be >= 0, got %d", index)
        return None
    return get_column(table[1:] if header else table, index)


def cmd_split(args: argparse.Namespace) -> int:
    """Split the input text and print it as TSV, CSV, JSON or a single column."""
    loaded = _load_inputs(args)
    if loaded is None:
        return 2
    text, config, row_sep = loaded
    observer = LoggingObserver()
    try:
        result = select_column_separator(text, row_sep, config=config, observer=observer)
    except SelectionError as e:
        logging.error("%s", e)
        return 1
    notify(observer, "separator_chosen", result.pattern)

    table = separate_string(row_sep, result.pattern, text)
    column = getattr(args, "column", None)
    if column is not None:
        values = _select_column(table, column, header=bool(args.header))
        if values is None:
            return 2
        for value in values:
            print(value)
        logging.info("Extracted %d cells with %r", len(values), result.pattern.pattern)
        return 0

    df = to_dataframe(table, header=bool(args.header))
    fmt = getattr(args, "format", "tsv")
    if fmt == "json":
        sys.stdout.write(df.to_json(orient="records" if args.header else "values"))
        sys.stdout.write("\n")
    else:
        sep = "," if fmt == "csv" else "\t"
        sys.stdout.write(
            df.to_csv(sep=sep, index=False, header=bool(args.header), lineterminator="\n")
        )
    logging.info("Split %d rows with %r", len(table), result.pattern.pattern)
    return 0


def _add_input_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--input",
        default=None,
        help="Text file to read (defaults to standard input)",
    )
    p.add_argument(
        "--row-separator",
        default=None,
        help="Regex separating rows (defaults to runs of newlines)",
    )
    p.add_argument(
        "--config",
        default=None,
        help="YAML file overriding thresholds and candidate separators",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="column-sniffer", description="Infer column separators in plain-text tables"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Only show warnings and errors",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Only show errors",
    )
    sub = p.add_subparsers(dest="command", required=True)

    p_detect = sub.add_parser("detect", help="Print the inferred column separator")
    _add_input_arguments(p_detect)
    p_detect.set_defaults(func=cmd_detect)

    p_split = sub.add_parser("split", help="Split text into a table")
    _add_input_arguments(p_split)
    p_split.add_argument(
        "--format",
        type=str.lower,
        choices=OUTPUT_FORMATS,
        default="tsv",
        help="Output format (case insensitive). Defaults to tsv",
    )
    p_split.add_argument(
        "--header",
        action="store_true",
        help="Treat the first row as column names",
    )
    p_split.add_argument(
        "--column",
        default=None,
        help="Only print one column, by header name (with --header) or zero-based index",
    )
    p_split.set_defaults(func=cmd_split)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
