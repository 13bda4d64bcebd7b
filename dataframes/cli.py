# dataframes/cli.py
from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from tqdm import tqdm

from .config import DEFAULT_DECIMAL, DEFAULT_DELIMITER, DEFAULT_FLOAT_PRECISION, setup_logging
from .df_types import Conditions
from .utils.dataframe import DataFrame
from .utils.loaders import load_table
from .utils.persist import FilePersister, MemoryPersister
from .utils.values import cell_to_string

logger = logging.getLogger(__name__)


def parse_conditions(expressions: Sequence[str]) -> Conditions:
    """Turns ["temperature=12", "day=3"] into {"temperature": "12", "day": "3"}."""
    conditions: Dict[str, str] = {}
    for expr in expressions:
        column, sep, value = expr.partition("=")
        if not sep or not column:
            raise ValueError(f"Invalid condition '{expr}'. Expected COLUMN=VALUE.")
        conditions[column] = value
    return conditions


# --- Sub-commands ---

def _cmd_show(args: argparse.Namespace) -> int:
    df = load_table(args.path, delimiter=args.delimiter, decimal=args.decimal)
    if args.where:
        df = df.where(parse_conditions(args.where))
    if args.sort_by:
        df.sort_by(args.sort_by, descending=args.descending)
    print(df.print(args.precision), end="")
    return 0


def _cmd_unique(args: argparse.Namespace) -> int:
    df = load_table(args.path, delimiter=args.delimiter, decimal=args.decimal)
    for value in df.unique_values(args.column):
        print(cell_to_string(value))
    return 0


async def _convert_all(args: argparse.Namespace) -> int:
    persister = FilePersister(args.out_dir)
    for src in tqdm(args.sources, desc="Convert", unit="file"):
        df = load_table(src, delimiter=args.delimiter, decimal=args.decimal)
        target_name = Path(src).with_suffix("." + args.to).name
        if args.to == "csv":
            await df.write_csv(target_name, persister, args.out_delimiter, args.out_decimal)
        else:
            persister(target_name, df.to_json())
    logger.info("Converted %d file(s) into %s", len(args.sources), args.out_dir)
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    return asyncio.run(_convert_all(args))


def run_demo() -> str:
    """Walkthrough of the table operations on a small weather sample; returns the printed output."""
    out: List[str] = []
    df = DataFrame(
        [
            [0, 13, 20.0],
            [1, 16, 4.5],
            [2, 12, 7.0],
            [3, 12, 0.0],
            [4, 11, 34.5],
            [5, 16, 0.0],
        ],
        ["day", "temperature", "rain"],
    )
    out.append(df.print())
    out.append(df.where({"temperature": 12}).print())

    df.add_column([100, 80, 90, 65, 100, 60], "humidity")
    out.append(df.print())
    df.add_column(["yes", "yes", "yes", "no", "yes", "no"], "isRaining")
    out.append(df.print())
    # shorter than the table: the last rows get NaN
    df.add_column([10, 30, 11, 14], "windSpeed")
    out.append(df.print())
    out.append(f"{df.unique_values('temperature')}\n")

    df.sort_by("temperature")
    out.append(df.print())
    df.sort_by("isRaining")
    out.append(df.print())
    df.sort_by("day", descending=True)
    out.append(df.print())

    persister = MemoryPersister()
    asyncio.run(df.write_csv("exports/test.csv", persister))
    out.append(persister.files["test.csv"].replace("\r\n", "\n"))

    salaries = DataFrame.from_csv("name,age,income\r\nJohn,24,50000\r\nJenna,30,56000\r\nJill,24,30000\r\n")
    out.append(salaries.print())
    return "\n".join(out)


def _cmd_demo(args: argparse.Namespace) -> int:
    print(run_demo())
    return 0


# --- Parser ---

def _add_csv_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--delimiter", type=str, default=DEFAULT_DELIMITER,
                        help="Field delimiter of CSV input.")
    parser.add_argument("--decimal", type=str, default=DEFAULT_DECIMAL,
                        help="Decimal mark of CSV input (e.g. ',' for '12,5').")


def build_parser() -> argparse.ArgumentParser:
    cli_parser = argparse.ArgumentParser(prog="dataframes",
                                         description="Inspect and convert small CSV/JSON tables.")
    cli_parser.add_argument("-v", "--verbose", action="store_true",
                            help="Enable debug logging.")
    subparsers = cli_parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print a table, optionally filtered and sorted.")
    show.add_argument("path", type=str, help="CSV or JSON file.")
    _add_csv_options(show)
    show.add_argument("--precision", type=int, default=DEFAULT_FLOAT_PRECISION,
                      help="Digits after the decimal point for non-integral numbers.")
    show.add_argument("--where", action="append", default=[], metavar="COLUMN=VALUE",
                      help="Keep rows where COLUMN equals VALUE. Can be repeated.")
    show.add_argument("--sort-by", type=str, default=None, help="Column to sort by.")
    show.add_argument("--descending", action="store_true", help="Sort in descending order.")
    show.set_defaults(handler=_cmd_show)

    unique = subparsers.add_parser("unique", help="List the distinct values of a column.")
    unique.add_argument("path", type=str, help="CSV or JSON file.")
    unique.add_argument("column", type=str, help="Column name.")
    _add_csv_options(unique)
    unique.set_defaults(handler=_cmd_unique)

    convert = subparsers.add_parser("convert", help="Convert files between CSV and JSON.")
    convert.add_argument("sources", nargs="+", help="CSV or JSON files to convert.")
    convert.add_argument("--to", choices=["csv", "json"], required=True, help="Output format.")
    convert.add_argument("--out-dir", type=str, default=".", help="Directory for the converted files.")
    _add_csv_options(convert)
    convert.add_argument("--out-delimiter", type=str, default=DEFAULT_DELIMITER,
                         help="Field delimiter of CSV output.")
    convert.add_argument("--out-decimal", type=str, default=DEFAULT_DECIMAL,
                         help="Decimal mark of CSV output.")
    convert.set_defaults(handler=_cmd_convert)

    demo = subparsers.add_parser("demo", help="Run a walkthrough on a small sample table.")
    demo.set_defaults(handler=_cmd_demo)
    return cli_parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    cli_args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if cli_args.verbose else logging.INFO)
    try:
        return cli_args.handler(cli_args)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1
