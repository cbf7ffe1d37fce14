"""CLI entry point: builds datasets from files, text or samples and reports them."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from .analyzer.frame import FrameAnalyzer
from .config import StatlabConfig, load_config
from .dataset import DatasetStore
from .errors import StatlabError
from .explain import DEFINITIONS, EXPLAINABLE, explain, format_value, format_values
from .importer import load_file, parse_numbers
from .report import summary_table, write_report
from .samples import SAMPLE_KINDS, generate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statlab",
        description="Compute and explain descriptive statistics of small datasets.",
    )
    parser.add_argument("files", nargs="*", type=Path, help=".csv or .txt files of numbers")
    parser.add_argument("--values", help="numbers separated by commas or spaces")
    parser.add_argument("--sample", choices=SAMPLE_KINDS, help="generate a sample dataset")
    parser.add_argument("--seed", type=int, help="seed for --sample")
    parser.add_argument(
        "--table",
        action="store_true",
        help="read files as CSV tables with a header row, one dataset per numeric column",
    )
    parser.add_argument("--explain", choices=EXPLAINABLE, help="show the calculation steps")
    parser.add_argument("--csv", type=Path, help="write the summary table to this path")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _store(values, config: StatlabConfig) -> DatasetStore:
    store = DatasetStore(config=config)
    store.replace_all(values)
    return store


def collect_datasets(args: argparse.Namespace, config: StatlabConfig) -> dict[str, DatasetStore]:
    """Turn the command line inputs into named dataset stores."""
    low, high = config.min_value, config.max_value
    datasets: dict[str, DatasetStore] = {}
    for path in args.files:
        if args.table:
            for col, values in FrameAnalyzer(pd.read_csv(path)).datasets():
                values = values[(values >= low) & (values <= high)]
                datasets[f"{path.stem}:{col}"] = _store(values.tolist(), config)
        else:
            datasets[path.stem] = _store(load_file(path, low, high), config)
    if args.values:
        datasets["values"] = _store(parse_numbers(args.values, low, high), config)
    if args.sample:
        seed = args.seed if args.seed is not None else config.seed
        datasets[args.sample] = _store(generate(args.sample, seed), config)
    return datasets


def _display(table: pd.DataFrame) -> pd.DataFrame:
    shown = table.copy()
    for col in ("mode", "outliers"):
        shown[col] = shown[col].map(format_values)
    for col in shown.columns.drop(["dataset", "count", "mode", "outliers"]):
        shown[col] = shown[col].map(lambda v: format_value(None if pd.isna(v) else v))
    return shown


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    config = load_config()
    level = logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        datasets = collect_datasets(args, config)
    except (StatlabError, OSError, ValueError) as exc:
        print(f"statlab: {exc}", file=sys.stderr)
        sys.exit(1)
    if not datasets:
        print("statlab: no input; give files, --values or --sample", file=sys.stderr)
        sys.exit(1)

    values = {name: store.values for name, store in datasets.items()}
    if args.csv:
        write_report(values, args.csv)
        logger.info("wrote %d row(s) to %s", len(values), args.csv)
    else:
        print(_display(summary_table(values)).to_string(index=False))

    if args.explain:
        definition = DEFINITIONS[args.explain]
        for name, store in datasets.items():
            print(f"\n--- {args.explain} of {name} ---")
            print(f"{definition['simple']} ({definition['formula']})")
            for step in explain(args.explain, store.values, store.statistics):
                print(f"{step.title}\n  {step.detail}")


if __name__ == "__main__":
    main()
