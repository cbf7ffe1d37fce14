"""Tabular summaries of several named datasets."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

import pandas as pd

from .analyzer.base import STAT_FIELDS, SampleAnalyzer


def summary_table(datasets: Mapping[str, Iterable[float]]) -> pd.DataFrame:
    """Return one row of statistics per dataset, in mapping order."""
    rows = [
        {"dataset": name, **SampleAnalyzer(values).summary().as_dict()}
        for name, values in datasets.items()
    ]
    return pd.DataFrame(rows, columns=["dataset", *STAT_FIELDS])


def write_report(datasets: Mapping[str, Iterable[float]], path: str | Path) -> pd.DataFrame:
    """Write :func:`summary_table` of *datasets* to *path* as CSV."""
    table = summary_table(datasets)
    table.to_csv(path, index=False)
    return table
